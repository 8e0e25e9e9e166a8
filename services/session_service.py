import logging
from typing import Optional

from schemas.poems import Poem
from services.store_service import PoemStore

logger = logging.getLogger(__name__)


class PoemSession:
    """Состояние страницы: текущий стих, флаг генерации, ошибка и сохраненные стихи.

    Каждая генерация получает порядковый номер; ответ на устаревший запрос
    (пользователь уже отправил новый) отбрасывается и не перезаписывает
    текущий стих.
    """

    def __init__(self, store: PoemStore):
        self.store = store
        self.current_poem: Optional[Poem] = None
        self.is_generating = False
        self.error: Optional[str] = None
        self._request_seq = 0

    def begin_generation(self) -> int:
        self._request_seq += 1
        self.is_generating = True
        self.error = None
        return self._request_seq

    def _is_current(self, token: int) -> bool:
        if token != self._request_seq:
            logger.info("Discarding stale generation result (request %s, current %s)", token, self._request_seq)
            return False
        return True

    def complete_generation(self, token: int, poem: Poem) -> bool:
        if not self._is_current(token):
            return False
        self.current_poem = poem
        self.is_generating = False
        return True

    def fail_generation(self, token: int, message: str) -> bool:
        if not self._is_current(token):
            return False
        self.error = message
        self.is_generating = False
        return True

    def finish_generation(self, token: int) -> None:
        """Снимает флаг генерации, если запрос все еще текущий (в том числе при отмене)."""
        if token == self._request_seq:
            self.is_generating = False

    def select_poem(self, poem: Poem) -> None:
        self.current_poem = poem
        self.error = None

    def is_current_saved(self) -> bool:
        return self.current_poem is not None and self.store.is_saved(self.current_poem.id)

    def toggle_save(self) -> str:
        """Сохраняет текущий стих или убирает его из сохраненных. Возвращает 'saved' или 'removed'."""
        if self.current_poem is None:
            raise LookupError("No poem to save")
        if self.store.is_saved(self.current_poem.id):
            self.store.remove(self.current_poem.id)
            return "removed"
        self.store.save(self.current_poem)
        return "saved"
