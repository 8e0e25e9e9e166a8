from .prompt_service import PromptService
from .ai_service import AIService
from .poem_service import PoemService
from .store_service import PoemStore
from .session_service import PoemSession

__all__ = ["PromptService", "AIService", "PoemService", "PoemStore", "PoemSession"]
