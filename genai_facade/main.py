from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from openai import AsyncOpenAI

from genai_facade.core import config
from genai_facade.api.routers.health import router as health_router
from genai_facade.api.routers.models import router as models_router
from genai_facade.api.routers.chat import router as chat_router
from genai_facade.api.routers.embeddings import router as embeddings_router
from genai_facade.providers.factory import get_client
from genai_facade.services.generation import GenerationService


def create_app(client: Optional[AsyncOpenAI] = None) -> FastAPI:
    app = FastAPI(title="GenAI Facade", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # one client handle for the whole app; routers reach it through Depends(get_generation_service)
    app.state.generation_service = GenerationService(client or get_client())

    # Routers
    app.include_router(health_router)
    app.include_router(models_router)
    app.include_router(chat_router)
    app.include_router(embeddings_router)

    return app


app = create_app()
