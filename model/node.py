from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr


class Credential(BaseModel):
    """alibabaCloudApi 凭证（两段密钥，不持久化、不打印）"""
    model_config = ConfigDict(populate_by_name=True)

    key_id: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("key_id", "keyId", "accessKeyId"),
        description="AccessKey ID",
    )
    key_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("key_secret", "keySecret", "accessKeySecret"),
        description="AccessKey Secret",
    )

    def is_complete(self) -> bool:
        return bool(
            self.key_id is not None and self.key_id.get_secret_value()
            and self.key_secret is not None and self.key_secret.get_secret_value()
        )


class Record(BaseModel):
    """工作流中的一条数据；json 载荷原地修改，宿主附加的其他键原样保留"""
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True, extra="allow")

    data: Dict[str, Any] = Field(default_factory=dict, alias="json", description="记录载荷")


class RequestParameters(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(description="模型 ID，例如 qwen-max")
    prompt: str = Field(description="发送给模型的提示词")


class CallResult(BaseModel):
    """单条记录的调用结果：response 与 error 二选一"""
    ok: bool
    response: Any = None
    error: Any = None

    @classmethod
    def success(cls, payload: Any) -> "CallResult":
        return cls(ok=True, response=payload)

    @classmethod
    def failure(cls, error: Any) -> "CallResult":
        return cls(ok=False, error=error)

    def apply(self, record: Record) -> Record:
        if self.ok:
            record.data.pop("error", None)
            record.data["response"] = self.response
        else:
            record.data.pop("response", None)
            record.data["error"] = self.error
        return record
