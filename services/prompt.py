from schemas.chat import Turn, UpstreamMessage, UpstreamPart
from services.knowledge_base import (
    ACKNOWLEDGMENT,
    KNOWLEDGE_BASE_REMINDER,
    SQA_KNOWLEDGE_BASE,
    SYSTEM_INSTRUCTIONS,
)

ROLE_MAP = {
    "user": "user",
    "assistant": "model",
}


def _message(role: str, text: str) -> UpstreamMessage:
    return UpstreamMessage(role=role, parts=[UpstreamPart(text=text)])


def build_preamble() -> list[UpstreamMessage]:
    """The fixed priming pair: instructions + knowledge as `user`, then the
    canned acknowledgment as `model`. The order matters to the model."""
    primer = (
        f"{SYSTEM_INSTRUCTIONS}\n\n"
        f"KNOWLEDGE BASE:\n{SQA_KNOWLEDGE_BASE}\n\n"
        f"{KNOWLEDGE_BASE_REMINDER}"
    )
    return [
        _message("user", primer),
        _message("model", ACKNOWLEDGMENT),
    ]


def build_contents(message: str, history: list[Turn]) -> list[UpstreamMessage]:
    # History is forwarded whole; callers bound its size.
    contents = build_preamble()
    contents.extend(_message(ROLE_MAP[turn.role], turn.content) for turn in history)
    contents.append(_message("user", message))
    return contents
