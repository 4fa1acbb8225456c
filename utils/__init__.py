from .tool import (
    create_session,
    DEFAULT_HEADERS,
    decode_body,
    mask_secret,
    is_valid_url,
)

__all__ = [
    "create_session",
    "DEFAULT_HEADERS",
    "decode_body",
    "mask_secret",
    "is_valid_url",
]
