import json
import logging
from typing import List, Optional

from schemas.poems import Poem

logger = logging.getLogger(__name__)

STORAGE_KEY = "savedPoems"
MAX_SAVED_POEMS = 20


class PoemStore:
    """Сохраненные стихи: упорядоченный (новые первыми) список не длиннее capacity.

    Весь список хранится одним JSON-массивом под одним ключом хранилища,
    каждая мутация - чтение, изменение и полная перезапись.
    """

    def __init__(self, storage, key: str = STORAGE_KEY, capacity: int = MAX_SAVED_POEMS):
        self.storage = storage
        self.key = key
        self.capacity = capacity

    def list(self) -> List[Poem]:
        """Возвращает сохраненные стихи.

        Отсутствующее или поврежденное значение трактуется как пустой список:
        сохраненные стихи - удобство, а не критичные данные, и испорченное
        состояние не должно ломать интерфейс.
        """
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return []
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a list, got {type(items).__name__}")
            return [Poem.model_validate(item) for item in items]
        except (ValueError, RecursionError) as e:
            # UnicodeDecodeError, json.JSONDecodeError и pydantic.ValidationError - подклассы ValueError;
            # RecursionError - слишком глубоко вложенный JSON
            logger.warning("Error parsing saved poems, treating as empty: %s", e)
            return []

    def get(self, poem_id: str) -> Optional[Poem]:
        for poem in self.list():
            if poem.id == poem_id:
                return poem
        return None

    def is_saved(self, poem_id: str) -> bool:
        return self.get(poem_id) is not None

    def save(self, poem: Poem) -> List[Poem]:
        poems = self.list()
        if any(p.id == poem.id for p in poems):
            return poems
        poems = [poem] + poems[: self.capacity - 1]
        self._write(poems)
        return poems

    def remove(self, poem_id: str) -> List[Poem]:
        poems = [p for p in self.list() if p.id != poem_id]
        self._write(poems)
        return poems

    def clear(self) -> None:
        self.storage.remove_item(self.key)

    def _write(self, poems: List[Poem]) -> None:
        payload = [p.model_dump(mode="json", by_alias=True) for p in poems]
        self.storage.set_item(self.key, json.dumps(payload, ensure_ascii=False))
