"""OpenAI client construction and response extraction.

The service never touches SDK response shapes directly; it goes through the
helpers here so a chat completion, a stream chunk and an embeddings response
each reduce to plain Python values.
"""

from typing import Any, Dict, List, Optional, Sequence

import httpx
from openai import AsyncOpenAI
from openai.types import CreateEmbeddingResponse
from openai.types.chat import ChatCompletion, ChatCompletionChunk

from genai_facade.core import config
from genai_facade.providers.base import ProviderError
from genai_facade.schemas.messages import Message


def make_client() -> AsyncOpenAI:
    timeout = httpx.Timeout(config.OPENAI_TIMEOUT, connect=10.0)
    return AsyncOpenAI(
        api_key=config.OPENAI_API_KEY,
        base_url=config.OPENAI_BASE_URL,
        timeout=timeout,
        max_retries=config.OPENAI_MAX_RETRIES,
    )


def to_wire(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    return [m.model_dump() for m in messages]


def completion_text(response: ChatCompletion) -> str:
    """Text of the first choice; an absent content (refusal, tool call) reads as ``""``."""
    if not response.choices:
        raise ProviderError("Chat completion returned no choices.")
    return response.choices[0].message.content or ""


def chunk_text(chunk: ChatCompletionChunk) -> Optional[str]:
    """Text carried by one stream chunk, or ``None`` when the chunk has none.

    Trailing usage chunks come with an empty ``choices`` list.
    """
    if not chunk.choices:
        return None
    return chunk.choices[0].delta.content


def embedding_vectors(response: CreateEmbeddingResponse) -> List[List[float]]:
    return [list(item.embedding) for item in response.data]
