"""
每个插件文件都需要导出名为 `handler` 的函数，作为工具入口。

参数:
- args: 入口函数的参数对象
- args.input: 输入参数（例如 args.input.prompt）
- args.logger: 日志记录器，由运行时注入
- args.credentials: alibabaCloudApi 凭证，由运行时注入（缺省时读 args.input.credentials）

返回:
返回的数据必须与声明的输出参数结构一致。
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

import logging

from model import (
    Credential,
    ModelCategory,
    Record,
    RequestParameters,
    all_categories,
    model_options,
)
from qwen_chat import MissingCredential, QwenClient, process

from .base import Args


CREDENTIAL_NAME = "alibabaCloudApi"


class Input(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    items: List[Record] = Field(default_factory=lambda: [Record()], description="输入记录，每条记录调用一次模型")
    model_category: ModelCategory = Field(default=ModelCategory.PAID, description="模型分类（仅用于界面筛选）")
    model_name: str = Field(default="", description="模型 ID，例如 qwen-max")
    prompt: str = Field(default="", description="发送给模型的提示词")
    per_item: Optional[List[Optional[RequestParameters]]] = Field(
        default=None,
        description="逐条覆盖的 model_name/prompt；第 i 项为空时使用节点级参数",
    )
    credentials: Optional[Credential] = Field(default=None, description="凭证（运行时未注入时使用）")
    timeout: Optional[float] = Field(default=None, gt=0, description="单次请求超时（秒），为空则不超时")


class Output(BaseModel):
    items: Optional[List[Record]] = Field(default=None, description="输出记录，与输入等长同序")
    status: str = Field(default="OK", description="响应状态标记")
    err_code: Optional[str] = Field(default=None, description="错误码（可选）")
    err_info: Optional[str] = Field(default=None, description="错误信息（可选）")


Metadata = {
    "name": "qwen_model",
    "display_name": "Qwen Model",
    "description": "调用阿里云通义千问模型：逐条转发提示词并返回模型响应",
    "group": ["transform"],
    "version": 1,
    "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
    "properties": [
        {
            "display_name": "Model Category",
            "name": "model_category",
            "type": "options",
            "options": all_categories(),
            "default": ModelCategory.PAID.value,
        },
        {
            "display_name": "Model Name",
            "name": "model_name",
            "type": "options",
            "options_by_category": {c.value: model_options(c) for c in ModelCategory},
            "default": "",
            "required": True,
        },
        {
            "display_name": "Prompt",
            "name": "prompt",
            "type": "string",
            "default": "",
            "required": True,
        },
    ],
    "input": Input.model_json_schema(),
    "output": Output.model_json_schema(),
}


def handler(args: Args[Input]) -> Output:
    logger = getattr(args, "logger", None) or logging.getLogger(__name__)
    try:
        inp = getattr(args, "input", None)
        if inp is None:
            inp = Input()
        elif isinstance(inp, dict):
            inp = Input.model_validate(inp)

        def credential_provider():
            # 运行时凭证不完整时回退到 input.credentials
            runtime = getattr(args, "credentials", None)
            if isinstance(runtime, dict):
                runtime = Credential.model_validate(runtime)
            if runtime is not None and runtime.is_complete():
                return runtime
            return inp.credentials or runtime

        def param_provider(i: int) -> RequestParameters:
            override = inp.per_item[i] if inp.per_item and i < len(inp.per_item) else None
            return override or RequestParameters(model_name=inp.model_name, prompt=inp.prompt)

        with QwenClient(timeout=inp.timeout) as client:
            items = process(inp.items, credential_provider, param_provider, client=client, logger=logger)
        return Output(items=items, status="OK")
    except MissingCredential as e:
        logger.error(f"{CREDENTIAL_NAME} 凭证缺失，未处理任何记录")
        return Output(items=None, status="ERROR", err_code="MISSING_CREDENTIAL", err_info=str(e))
    except Exception as e:
        logger.exception("qwen_model handler failed")
        return Output(items=None, status="ERROR", err_code="PLUGIN_ERROR", err_info=str(e))
