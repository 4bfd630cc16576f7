from functools import lru_cache
from typing import Any, Protocol

import google.generativeai as genai


class UpstreamClient(Protocol):
    """Anything that can run one generateContent call and hand back the raw
    payload as plain dicts/lists. No SDK types leak through."""

    async def generate_content(
        self,
        contents: list[dict],
        generation_config: dict,
        timeout: float,
    ) -> Any: ...


class GeminiClient:
    def __init__(self, api_key: str, model_name: str):
        # The SDK keeps its credential process-wide; build through
        # `get_gemini_client` so this runs once.
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name=model_name)

    async def generate_content(
        self,
        contents: list[dict],
        generation_config: dict,
        timeout: float,
    ) -> dict:
        response = await self.model.generate_content_async(
            contents,  # type: ignore[arg-type]
            generation_config=generation_config,  # type: ignore[arg-type]
            request_options={"timeout": timeout},
        )
        return response.to_dict()


@lru_cache
def get_gemini_client(api_key: str, model_name: str) -> GeminiClient:
    # One client per (key, model), so `genai.configure` runs once per process.
    return GeminiClient(api_key=api_key, model_name=model_name)
