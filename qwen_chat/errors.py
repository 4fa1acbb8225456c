from typing import Any, Optional


class MissingCredential(Exception):
    """凭证缺失或不完整：整个调用失败，不处理任何记录"""


class RemoteCallFailure(Exception):
    """
    单条记录的远端调用失败。

    - 远端返回了响应体：payload 为解析后的响应体，写入 error 时原样使用
    - 无响应体（连接失败、超时等）：只有 message
    """

    def __init__(self, message: str, payload: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload
        self.status_code = status_code

    @property
    def has_payload(self) -> bool:
        return self.payload is not None

    def to_error_value(self) -> Any:
        if self.has_payload:
            return self.payload
        return self.message or self.__class__.__name__
