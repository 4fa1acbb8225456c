from .node_response import NodeResponse

__all__ = ["NodeResponse"]
