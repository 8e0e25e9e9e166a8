from .poems import router as poems_router
from .saved import router as saved_router
from .pages import router as pages_router

__all__ = ["poems_router", "saved_router", "pages_router"]
