import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.ai_router import ai_router
from utils.settings import get_settings

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Application startup...")

    settings = get_settings()
    if not settings.GEMINI_API_KEY:
        log.warning("GEMINI_API_KEY is not set. Chat requests will fail until it is configured.")
    log.info(f"Using Gemini model: {settings.GEMINI_MODEL}")

    yield

    log.info("Application shutdown...")


app = FastAPI(
    title="SQAI Chat API",
    description="Software Quality Assurance assistant backed by Google Gemini.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ai_router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Welcome to the SQAI Chat API",
        "model": get_settings().GEMINI_MODEL,
    }
