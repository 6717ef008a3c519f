from .base import ApiClient, DecodeFailure, RequestFailure, TransportFailure  # noqa: F401
from .huggingface import HuggingFaceClient  # noqa: F401
from .picsum import PicsumClient  # noqa: F401
from .trivia import TriviaClient  # noqa: F401

__all__ = [
    "ApiClient",
    "RequestFailure",
    "TransportFailure",
    "DecodeFailure",
    "HuggingFaceClient",
    "PicsumClient",
    "TriviaClient",
]
