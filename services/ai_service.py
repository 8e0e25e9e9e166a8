import logging
from typing import Any, Dict, Optional

import httpx

from core.exceptions import InvalidResponseError, UpstreamError

logger = logging.getLogger(__name__)


class AIService:
    """Клиент OpenAI-совместимого chat/completions провайдера."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        customer_id: str,
        model: str,
        temperature: float = 0.8,
        max_tokens: int = 500,
        timeout: Optional[float] = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.customer_id = customer_id
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        # Подменяется в тестах (httpx.MockTransport)
        self.transport = transport

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "AIService":
        return cls(
            api_url=settings.POEM_API_URL,
            api_key=settings.POEM_API_KEY,
            customer_id=settings.POEM_CUSTOMER_ID,
            model=settings.POEM_MODEL,
            temperature=settings.TEMPERATURE,
            max_tokens=settings.MAX_TOKENS,
            timeout=settings.POEM_API_TIMEOUT,
            transport=transport,
        )

    def build_payload(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def build_headers(self) -> Dict[str, str]:
        return {
            "CustomerId": self.customer_id,
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    @staticmethod
    def extract_content(data: Any) -> str:
        """Достает текст из choices[0].message.content или бросает UpstreamError."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            logger.error("Invalid API response structure: %r", data)
            raise InvalidResponseError() from None
        if not isinstance(content, str):
            logger.error("Completion content is not a string: %r", content)
            raise InvalidResponseError()
        return content

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Один запрос к провайдеру без повторов. Возвращает сырой текст ответа."""
        logger.info("Sending request to API with model: %s", self.model)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    headers=self.build_headers(),
                    json=self.build_payload(system_prompt, user_prompt),
                )
        except httpx.HTTPError as e:
            logger.error("API request failed: %s", e)
            raise UpstreamError("upstream unreachable", details=str(e)) from e

        logger.info("API Response status: %s", response.status_code)

        if not response.is_success:
            error_text = response.text
            logger.error("API Error: %s %s %s", response.status_code, response.reason_phrase, error_text)
            raise UpstreamError(
                "upstream returned an error",
                status_code=response.status_code,
                details=error_text,
            )

        try:
            data = response.json()
        except ValueError:
            logger.error("API response is not JSON: %s", response.text[:200])
            raise InvalidResponseError(status_code=response.status_code) from None

        logger.debug("API Response data: %s", data)
        return self.extract_content(data)
