from .enums import ModelCategory
from .node import Credential, Record, RequestParameters, CallResult
from .response import NodeResponse
from .catalog import (
    MODEL_CATALOG,
    models_for,
    model_options,
    all_categories,
    category_of,
)

__all__ = [
    "ModelCategory",
    "Credential",
    "Record",
    "RequestParameters",
    "CallResult",
    "NodeResponse",
    "MODEL_CATALOG",
    "models_for",
    "model_options",
    "all_categories",
    "category_of",
]
