from .client import QwenClient, API_HOST, CHAT_PATH_TEMPLATE, build_headers
from .errors import MissingCredential, RemoteCallFailure
from .forwarder import process, forward_one, resolve_credential

__all__ = [
    "QwenClient",
    "API_HOST",
    "CHAT_PATH_TEMPLATE",
    "build_headers",
    "MissingCredential",
    "RemoteCallFailure",
    "process",
    "forward_one",
    "resolve_credential",
]
