from openai import AsyncOpenAI
from genai_facade.core import config
from genai_facade.providers.base import ProviderError

def get_client() -> AsyncOpenAI:
    if config.PROVIDER == "openai":
        from genai_facade.providers.openai import make_client
        return make_client()
    raise ProviderError(f"Unknown provider: {config.PROVIDER}")
