"""
AI polish service.
Turns a PolishRequest into a PolishResponse with a single call to an
OpenAI-compatible chat completions endpoint.
"""
from typing import Optional
import logging

import httpx
from pydantic import ValidationError

from .config import ServiceConfig, load_config
from .errors import RemoteMalformed, RemoteRejected, RemoteUnavailable
from .improvements import derive_improvements
from .prompts import SYSTEM_PROMPT, build_polish_prompt
from .schemas import (
    ChatCompletionRequest, ChatCompletionResponse, ChatMessage,
    PolishRequest, PolishResponse,
)

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 2000


class PolishService:
    """Shared, read-only polish orchestrator.

    Holds the configuration and one AsyncClient for the lifetime of the
    process; safe to use from concurrent requests.
    """

    def __init__(self, config: ServiceConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(timeout=config.timeout)
        logger.info(f"AI Service initialized with model: {config.model}")

    @classmethod
    def from_env(cls) -> "PolishService":
        return cls(load_config())

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def build_completion_request(self, request: PolishRequest) -> ChatCompletionRequest:
        prompt = build_polish_prompt(request.text, request.section_type)
        return ChatCompletionRequest(
            model=self.config.model,
            messages=[
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=prompt),
            ],
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
        )

    async def polish(self, request: PolishRequest) -> PolishResponse:
        """Polish ``request.text``; raises a ServiceError subclass on any remote failure."""
        chat_request = self.build_completion_request(request)
        url = self.config.completions_url

        logger.info(f"Calling AI API: {url}")
        logger.debug(f"Request: {chat_request.model_dump()}")

        http_request = self.client.build_request(
            "POST", url, headers=self._headers(), json=chat_request.model_dump()
        )
        # stream=True: the body is read below, once the status is known
        try:
            response = await self.client.send(http_request, stream=True)
        except httpx.HTTPError as e:
            raise _unavailable(e) from e

        try:
            if not response.is_success:
                body = await _read_error_body(response)
                logger.error(f"AI API error {response.status_code}: {body}")
                raise RemoteRejected(response.status_code, body)
            try:
                await response.aread()
            except httpx.HTTPError as e:
                raise _unavailable(e) from e
        finally:
            await response.aclose()

        try:
            completion = ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Failed to parse AI response: {e}")
            raise RemoteMalformed(str(e)) from e

        if completion.choices:
            polished = completion.choices[0].message.content.strip()
        else:
            # An empty choice list is not an error; hand the original back
            polished = request.text

        logger.info("AI polishing completed successfully")

        return PolishResponse(
            original=request.text,
            polished=polished,
            improvements=derive_improvements(request.text, polished),
        )


def _unavailable(e: httpx.HTTPError) -> RemoteUnavailable:
    reason = str(e) or e.__class__.__name__
    logger.error(f"AI API request failed: {reason}")
    return RemoteUnavailable(reason)


async def _read_error_body(response: httpx.Response) -> str:
    try:
        await response.aread()
        return response.text
    except (UnicodeDecodeError, LookupError, httpx.HTTPError):
        return "Unknown error"
