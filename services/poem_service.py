import logging
import re
import secrets
import time
from datetime import datetime, timezone
from typing import List, Optional

from core.exceptions import UpstreamError, ValidationError
from schemas.poems import Poem
from services.ai_service import AIService
from services.prompt_service import PromptService

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "free verse"
DEFAULT_MOOD = "neutral"

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_poem_id() -> str:
    """poem_<время в мс>_<9 случайных символов base36>."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"poem_{int(time.time() * 1000)}_{suffix}"


class PoemService:
    def __init__(self, ai_service: AIService):
        self.ai_service = ai_service

    async def generate(self, theme: Optional[str], style: Optional[str] = None, mood: Optional[str] = None) -> Poem:
        if not isinstance(theme, str) or not theme.strip():
            raise ValidationError("theme required")

        style = style.strip() if style and style.strip() else DEFAULT_STYLE
        mood = mood.strip() if mood and mood.strip() else DEFAULT_MOOD

        system_prompt = PromptService.create_system_prompt(style, mood)
        user_prompt = PromptService.create_user_prompt(theme, style, mood)

        content = (await self.ai_service.complete(system_prompt, user_prompt)).strip()
        if not content:
            raise UpstreamError("empty completion", details="The AI service returned an empty poem")

        return Poem(
            id=generate_poem_id(),
            content=content,
            theme=theme.strip(),
            style=style.lower(),
            mood=mood.lower(),
            created_at=datetime.now(timezone.utc),
        )

    # --- Отображение, скачивание, «поделиться» ---

    @staticmethod
    def format_lines(content: str) -> List[str]:
        """Строки стиха; пустые строки заменяются неразрывным пробелом, чтобы сохранить строфы."""
        return [line.strip() or "\u00a0" for line in content.split("\n")]

    @staticmethod
    def truncate_text(text: str, max_length: int = 100) -> str:
        if len(text) <= max_length:
            return text
        return text[:max_length] + "..."

    @staticmethod
    def format_date(value: datetime) -> str:
        return f"{value.strftime('%b')} {value.day}, {value.strftime('%H:%M')}"

    @staticmethod
    def download_filename(poem: Poem) -> str:
        slug = re.sub(r"\s+", "-", poem.theme.lower())
        return f"poem-{slug}.txt"

    @staticmethod
    def format_download_text(poem: Poem) -> str:
        created = poem.created_at
        return (
            f"{poem.content}\n\n---\n"
            f"Theme: {poem.theme}\n"
            f"Style: {poem.style}\n"
            f"Mood: {poem.mood}\n"
            f"Created: {created.month}/{created.day}/{created.year}"
        )

    @staticmethod
    def share_title(poem: Poem) -> str:
        return f"A {poem.style} poem about {poem.theme}"

    @staticmethod
    def share_text(poem: Poem) -> str:
        return f"Check out this {poem.style} poem about {poem.theme}:\n\n{poem.content}"
