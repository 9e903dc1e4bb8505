from fastapi import APIRouter, Depends
from genai_facade.api.deps import get_generation_service
from genai_facade.core import config
from genai_facade.schemas.api import ModelsResponse
from genai_facade.services.generation import GenerationService

router = APIRouter(tags=["models"])

@router.get("/models", response_model=ModelsResponse)
def list_models(service: GenerationService = Depends(get_generation_service)) -> ModelsResponse:
    return ModelsResponse(
        provider=config.PROVIDER,
        chat_model=service.chat_model,
        temperature=service.temperature,
        embedding_model=config.EMBEDDING_MODEL,
    )
