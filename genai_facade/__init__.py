from genai_facade.services.generation import GenerationService
from genai_facade.providers.base import ProviderError

__all__ = ["GenerationService", "ProviderError"]
