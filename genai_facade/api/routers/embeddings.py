from fastapi import APIRouter, HTTPException, Depends
from openai import OpenAIError
from genai_facade.schemas.api import EmbeddingRequest, EmbeddingResponse
from genai_facade.api.deps import get_generation_service
from genai_facade.core import config
from genai_facade.providers.base import ProviderError
from genai_facade.services.generation import GenerationService

router = APIRouter(tags=["embeddings"])

@router.post("/embeddings", response_model=EmbeddingResponse)
async def embeddings(req: EmbeddingRequest, service: GenerationService = Depends(get_generation_service)):
    model = req.model or config.EMBEDDING_MODEL
    try:
        vectors = await service.embed(req.texts, model)
    except (OpenAIError, ProviderError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return EmbeddingResponse(embeddings=vectors, model=model)
