from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: list[Turn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    response: str
    error: str | None = None


# --- Gemini wire shapes ---


class UpstreamPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class UpstreamMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"]
    parts: list[UpstreamPart]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_output_tokens: int = 2048
    temperature: float = 0.7
    top_p: float = 0.95
    top_k: int = 40
