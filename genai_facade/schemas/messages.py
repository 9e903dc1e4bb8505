"""Call-scoped values sent to the chat and embedding endpoints.

``Message`` is a closed union discriminated on ``role``; options are frozen so a
value built for one call cannot be changed underneath it.
"""

from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SystemMessage(_Frozen):
    role: Literal["system"] = "system"
    content: str = ""


class UserMessage(_Frozen):
    role: Literal["user"] = "user"
    content: str = ""


class AssistantMessage(_Frozen):
    role: Literal["assistant"] = "assistant"
    content: str = ""


Message = Annotated[
    Union[SystemMessage, UserMessage, AssistantMessage],
    Field(discriminator="role"),
]


class ChatOptions(_Frozen):
    model: str
    temperature: float


class EmbeddingOptions(_Frozen):
    model: str


EmbeddingVector = List[float]
