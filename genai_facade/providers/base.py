# shared provider contract: the local error type and the embeddings return shape
# a provider client must expose a blocking chat call, a streaming chat call and an embeddings call

from typing import List


# local failures that are not raised by the provider client itself
# (unknown provider setting, a response that carries no result to extract)
class ProviderError(Exception):
    pass


# one vector per input text, same order as the inputs
EmbedReturn = List[List[float]]
