from typing import List, Optional

from genai_facade.core import config
from genai_facade.schemas.messages import (
    AssistantMessage,
    ChatOptions,
    EmbeddingOptions,
    Message,
    SystemMessage,
    UserMessage,
)

def build_messages(text: str) -> List[Message]:
    # system and assistant slots are sent empty; the user slot carries the input as-is
    return [
        SystemMessage(content=""),
        UserMessage(content=text),
        AssistantMessage(content=""),
    ]

def build_chat_options(model: Optional[str] = None, temperature: Optional[float] = None) -> ChatOptions:
    return ChatOptions(
        model=model or config.CHAT_MODEL,
        temperature=config.TEMPERATURE if temperature is None else temperature,
    )

def build_embedding_options(model: str) -> EmbeddingOptions:
    return EmbeddingOptions(model=model)
