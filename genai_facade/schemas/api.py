from pydantic import BaseModel, Field
from typing import List, Optional

class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=4000)
    stream: bool = Field(default=False)

class ChatResponse(BaseModel):
    reply: str
    model: Optional[str] = None
    provider: Optional[str] = None

class EmbeddingRequest(BaseModel):
    texts: List[str] = Field(max_length=2048)
    model: Optional[str] = None

class EmbeddingResponse(BaseModel):
    embeddings: List[List[float]]
    model: str

class ModelsResponse(BaseModel):
    provider: str
    chat_model: str
    temperature: float
    embedding_model: str
