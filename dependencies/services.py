from fastapi import Depends

from core.config import settings
from core.database import get_storage
from services.ai_service import AIService
from services.poem_service import PoemService
from services.session_service import PoemSession
from services.store_service import PoemStore

_session = None


def get_ai_service() -> AIService:
    return AIService.from_settings(settings)


def get_poem_service(ai_service: AIService = Depends(get_ai_service)) -> PoemService:
    return PoemService(ai_service)


def get_poem_store(storage=Depends(get_storage)) -> PoemStore:
    return PoemStore(storage, key=settings.STORAGE_KEY)


def get_session(store: PoemStore = Depends(get_poem_store)) -> PoemSession:
    """Одна сессия на процесс: приложение однопользовательское."""
    global _session
    if _session is None:
        _session = PoemSession(store)
    return _session
