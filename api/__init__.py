from .qwen_api import qwen_router

__all__ = [
    "qwen_router",
]
