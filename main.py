import logging

from fastapi import FastAPI

from core.config import settings
from routers import poems_router, saved_router, pages_router

# --- ЛОГИРОВАНИЕ ---
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Каждый запрос к провайдеру httpx пишет в INFO, это засоряет консоль
logging.getLogger("httpx").setLevel(logging.WARNING)

# --- ПРИЛОЖЕНИЕ ---
app = FastAPI(title="AI Poem Generator")

app.include_router(poems_router)
app.include_router(saved_router)
app.include_router(pages_router)


if __name__ == "__main__":
    print("Запуск FastAPI приложения...")
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
