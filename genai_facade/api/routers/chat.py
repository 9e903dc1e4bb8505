import logging
from fastapi import APIRouter, HTTPException, Request, Depends
from fastapi.responses import StreamingResponse
from openai import OpenAIError
from genai_facade.schemas.api import ChatRequest, ChatResponse
from genai_facade.api.deps import get_generation_service
from genai_facade.core import config
from genai_facade.providers.base import ProviderError
from genai_facade.services.generation import GenerationService

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)

@router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest, request: Request, service: GenerationService = Depends(get_generation_service)):
    # Non-stream path
    if not req.stream:
        try:
            reply = await service.complete(req.message)
        except (OpenAIError, ProviderError) as e:
            raise HTTPException(status_code=502, detail=str(e))
        return ChatResponse(reply=reply, model=service.chat_model, provider=config.PROVIDER)

    # Stream path: the provider call starts on the first pull, inside the response body
    gen = service.complete_stream(req.message)

    async def streamer():
        try:
            async for chunk in gen:
                if await request.is_disconnected():
                    logger.info("client disconnected, stopping stream")
                    break
                yield chunk.encode("utf-8")
        except Exception as e:
            logger.exception("streaming error occurred: %s", e)
        finally:
            await gen.aclose()

    return StreamingResponse(streamer(), media_type="text/plain; charset=utf-8")
