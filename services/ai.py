import asyncio
import logging
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import Depends, status
from pydantic import ValidationError

from exceptions import (
    ChatError,
    ConfigurationMissingError,
    InvalidCredentialError,
    InvalidInputError,
    MethodNotAllowedError,
    UpstreamFailureError,
)
from schemas.chat import ChatRequest, ChatResponse, GenerationConfig
from services.gemini import UpstreamClient, get_gemini_client
from services.prompt import build_contents
from utils.settings import Settings, get_settings

log = logging.getLogger(__name__)

UPSTREAM_TIMEOUT_SECONDS = 15.0
GENERATION_CONFIG = GenerationConfig()

EMPTY_GENERATION_REPLY = "I couldn't generate a response. Please try again."
GENERIC_FAILURE_MESSAGE = "An error occurred while processing your request"
INVALID_KEY_SIGNAL = "API_KEY_INVALID"


def extract_reply_text(payload: Any) -> str | None:
    """Pull `candidates[0].content.parts[0].text` out of an untrusted payload.

    Returns None when any step is missing or the text is blank.
    """
    if not isinstance(payload, dict):
        return None

    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None

    text = parts[0].get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text


class ChatGateway:
    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[str, str], UpstreamClient] = get_gemini_client,
        timeout: float = UPSTREAM_TIMEOUT_SECONDS,
    ):
        self.settings = settings
        self.client_factory = client_factory
        self.timeout = timeout

    async def handle(self, method: str, payload: Any) -> tuple[ChatResponse, int]:
        try:
            chat_request = self._validate(method, payload)
            api_key = self._require_api_key()
            upstream_payload = await self._generate(api_key, chat_request)
        except ChatError as e:
            log.error(f"Chat request failed: {e}")
            return ChatResponse(response="", error=e.message), e.status_code

        text = extract_reply_text(upstream_payload)
        if text is None:
            # The call itself succeeded, so this is not an error.
            log.warning(f"Gemini returned an unexpected response: {upstream_payload!r}")
            return ChatResponse(response=EMPTY_GENERATION_REPLY), status.HTTP_200_OK

        return ChatResponse(response=text), status.HTTP_200_OK

    def _validate(self, method: str, payload: Any) -> ChatRequest:
        if method.upper() != "POST":
            raise MethodNotAllowedError("Method not allowed", detail=f"method={method}")

        message = payload.get("message") if isinstance(payload, dict) else None
        if not isinstance(message, str) or not message:
            raise InvalidInputError("Invalid message", detail=f"message={message!r}")

        history = payload.get("history")
        if history is None:
            history = []
        try:
            return ChatRequest(message=message, history=history)
        except ValidationError as e:
            raise InvalidInputError("Invalid history", detail=str(e)) from e

    def _require_api_key(self) -> str:
        # Only the gateway reads the key; it never leaves the server.
        api_key = self.settings.GEMINI_API_KEY
        if not api_key:
            raise ConfigurationMissingError(
                "Gemini API key not configured. "
                "Please add GEMINI_API_KEY to your configuration",
                detail="GEMINI_API_KEY missing",
            )
        return api_key

    async def _generate(self, api_key: str, chat_request: ChatRequest) -> Any:
        contents = build_contents(chat_request.message, chat_request.history)

        try:
            client = self.client_factory(api_key, self.settings.GEMINI_MODEL)
            return await asyncio.wait_for(
                client.generate_content(
                    contents=[message.model_dump() for message in contents],
                    generation_config=GENERATION_CONFIG.model_dump(),
                    timeout=self.timeout,
                ),
                timeout=self.timeout,
            )
        except Exception as e:  # noqa: BLE001
            detail = str(e)
            if INVALID_KEY_SIGNAL in detail:
                raise InvalidCredentialError(
                    "Invalid API key. Please check your GEMINI_API_KEY.",
                    detail=detail,
                ) from e
            raise UpstreamFailureError(
                detail or GENERIC_FAILURE_MESSAGE,
                detail=f"{type(e).__name__}: {detail}",
            ) from e


def get_chat_gateway(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ChatGateway:
    return ChatGateway(settings=settings)
