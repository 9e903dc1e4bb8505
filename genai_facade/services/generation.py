"""Completion, streamed completion and embeddings behind one service.

Each call builds its own messages and options, makes one provider round trip
and reduces the response to plain values. Provider exceptions are not caught
here; callers see them as raised by the ``openai`` client.
"""

import logging
from typing import AsyncIterator, Optional, Sequence

from openai import AsyncOpenAI

from genai_facade.core import config
from genai_facade.providers.base import EmbedReturn
from genai_facade.providers.openai import (
    chunk_text,
    completion_text,
    embedding_vectors,
    to_wire,
)
from genai_facade.schemas.messages import ChatOptions
from genai_facade.services.prompt import (
    build_chat_options,
    build_embedding_options,
    build_messages,
)

logger = logging.getLogger(__name__)


class GenerationService:
    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        chat_model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        # chat_model/temperature fall back to config at call time when left unset
        self._client = client
        self._chat_model = chat_model
        self._temperature = temperature

    def _chat_options(self) -> ChatOptions:
        return build_chat_options(self._chat_model, self._temperature)

    @property
    def chat_model(self) -> str:
        return self._chat_model or config.CHAT_MODEL

    @property
    def temperature(self) -> float:
        return config.TEMPERATURE if self._temperature is None else self._temperature

    async def complete(self, text: str) -> str:
        """Send ``text`` as the user message and return the whole reply."""
        messages = build_messages(text)
        options = self._chat_options()
        logger.debug("chat completion: model=%s input_chars=%d", options.model, len(text))
        response = await self._client.chat.completions.create(
            model=options.model,
            messages=to_wire(messages),
            temperature=options.temperature,
        )
        return completion_text(response)

    async def complete_stream(self, text: str) -> AsyncIterator[str]:
        """Yield reply fragments as the provider emits them.

        Nothing is sent until the first fragment is requested. Chunks without
        text are skipped. Closing the iterator early closes the provider stream.
        """
        messages = build_messages(text)
        options = self._chat_options()
        logger.debug("chat stream: model=%s input_chars=%d", options.model, len(text))
        stream = await self._client.chat.completions.create(
            model=options.model,
            messages=to_wire(messages),
            temperature=options.temperature,
            stream=True,
        )
        async with stream:
            async for chunk in stream:
                piece = chunk_text(chunk)
                if piece is None:
                    continue
                yield piece

    async def embed(self, texts: Sequence[str], model: str) -> EmbedReturn:
        """One vector per input text, in input order."""
        if not texts:
            return []
        options = build_embedding_options(model)
        logger.debug("embeddings: model=%s inputs=%d", options.model, len(texts))
        response = await self._client.embeddings.create(
            model=options.model,
            input=list(texts),
            encoding_format="float",
        )
        return embedding_vectors(response)
