import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from schemas.chat import ChatResponse
from services.ai import ChatGateway, get_chat_gateway

ai_router = APIRouter(
    prefix="/api",
    tags=["AI Assistant"],
)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def _read_json(request: Request):
    # Malformed or missing bodies fall through to the gateway's own
    # validation, which answers with "Invalid message".
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


@ai_router.api_route(
    "/chat",
    methods=ALL_METHODS,
    response_model=ChatResponse,
    summary="Ask the SQA assistant a question",
)
async def handle_chat(
    request: Request,
    gateway: Annotated[ChatGateway, Depends(get_chat_gateway)],
):
    # Every method is routed here so non-POST calls get the same JSON
    # error body as every other failure instead of FastAPI's default 405.
    payload = await _read_json(request)
    chat_response, status_code = await gateway.handle(request.method, payload)
    return JSONResponse(
        status_code=status_code,
        content=chat_response.model_dump(exclude_none=True),
    )
