# tests/conftest.py
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from fastapi.testclient import TestClient

from core.database import MemoryStorage
from dependencies.services import get_ai_service, get_poem_store, get_session
from schemas import Poem
from services.ai_service import AIService
from services.poem_service import PoemService
from services.session_service import PoemSession
from services.store_service import PoemStore

API_URL = "https://llm.test/chat/completions"

HAIKU = "Waves crash gently\nMoonlight dances on the foam\nPeace fills the night air"


def completion(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


class UpstreamStub:
    """Обработчик для httpx.MockTransport: запоминает запросы и отдает заданный ответ."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.json_body = completion(HAIKU)
        self.text_body = None
        self.error = None

    def reply(self, status_code=200, json_body=None, text_body=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text_body

    def fail(self, error):
        self.error = error

    @property
    def last_payload(self):
        return json.loads(self.calls[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)


def make_poem(index: int = 0, **overrides) -> Poem:
    data = {
        "id": f"poem_{1700000000000 + index}_abc{index:06d}",
        "content": f"Line one of poem {index}\n\nLine two",
        "theme": f"theme {index}",
        "style": "haiku",
        "mood": "peaceful",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=index),
    }
    data.update(overrides)
    return Poem(**data)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def ai_service(upstream):
    return AIService(
        api_url=API_URL,
        api_key="test-key",
        customer_id="tester@example.com",
        model="test/poet-model",
        transport=httpx.MockTransport(upstream),
    )


@pytest.fixture
def poem_service(ai_service):
    return PoemService(ai_service)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return PoemStore(storage)


@pytest.fixture
def session(store):
    return PoemSession(store)


@pytest.fixture
def client(ai_service, store, session):
    from main import app

    app.dependency_overrides[get_ai_service] = lambda: ai_service
    app.dependency_overrides[get_poem_store] = lambda: store
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
