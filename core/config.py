import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings:
    # Провайдер модели (OpenAI-совместимый chat/completions)
    POEM_API_URL = os.getenv("POEM_API_URL", "https://oi-server.onrender.com/chat/completions")
    POEM_API_KEY = os.getenv("POEM_API_KEY", "")
    POEM_CUSTOMER_ID = os.getenv("POEM_CUSTOMER_ID", "")
    POEM_MODEL = os.getenv("POEM_MODEL", "anthropic/claude-3.5-sonnet")
    POEM_API_TIMEOUT = float(os.getenv("POEM_API_TIMEOUT", "60"))

    # Параметры генерации фиксированы
    TEMPERATURE = 0.8
    MAX_TOKENS = 500

    # Хранилище сохраненных стихов
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
    STORAGE_DIR = os.getenv("STORAGE_DIR", str(BASE_DIR / "data"))
    STORAGE_KEY = os.getenv("STORAGE_KEY", "savedPoems")

    # Supabase (только для STORAGE_BACKEND=supabase)
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY")
    SUPABASE_STORAGE_TABLE = os.getenv("SUPABASE_STORAGE_TABLE", "local_storage")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    TEMPLATES_DIR = str(BASE_DIR / "templates")

settings = Settings()
