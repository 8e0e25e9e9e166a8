import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from core.config import settings

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Хранилище ключ-значение в памяти процесса (для тестов и отладки)."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """Аналог localStorage на диске: один файл <key>.json на ключ."""

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Пишем во временный файл и подменяем, чтобы запись была атомарной
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()


class SupabaseStorage:
    """Хранит значения в таблице Supabase (колонки key, value)."""

    def __init__(self, client, table: str):
        self.client = client
        self.table = table

    def get_item(self, key: str) -> Optional[str]:
        response = self.client.table(self.table).select("value").eq("key", key).execute()
        if response.data:
            return response.data[0]["value"]
        return None

    def set_item(self, key: str, value: str) -> None:
        self.client.table(self.table).upsert({"key": key, "value": value}).execute()

    def remove_item(self, key: str) -> None:
        self.client.table(self.table).delete().eq("key", key).execute()


def create_supabase_storage() -> SupabaseStorage:
    from supabase import create_client, Client

    # Проверка наличия переменных окружения
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise RuntimeError("Supabase URL and Key must be set in the .env file")

    client: Client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return SupabaseStorage(client, settings.SUPABASE_STORAGE_TABLE)


_storage = None


def get_storage():
    """Возвращает хранилище, выбранное через STORAGE_BACKEND."""
    global _storage
    if _storage is None:
        backend = settings.STORAGE_BACKEND.lower()
        if backend == "memory":
            _storage = MemoryStorage()
        elif backend == "supabase":
            _storage = create_supabase_storage()
        elif backend == "file":
            _storage = FileStorage(settings.STORAGE_DIR)
        else:
            raise RuntimeError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
        logger.info("Using %s storage backend", backend)
    return _storage
