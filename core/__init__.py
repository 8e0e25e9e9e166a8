# core/__init__.py
from .config import settings
from .database import get_storage, MemoryStorage, FileStorage, SupabaseStorage

__all__ = ["settings", "get_storage", "MemoryStorage", "FileStorage", "SupabaseStorage"]
