"""
请求转发：逐条记录调用模型接口，把 response 或 error 写回记录。

- 凭证每次调用只解析一次，缺失时在发出任何请求前抛出 MissingCredential
- 记录严格按输入顺序串行处理，单条失败不影响后续记录
- 输出与输入等长同序
"""
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from model import CallResult, Credential, Record, RequestParameters, category_of
from utils.tool import mask_secret

from .client import QwenClient
from .errors import MissingCredential, RemoteCallFailure


CredentialProvider = Callable[[], Optional[Credential]]
ParamProvider = Callable[[int], Union[RequestParameters, Mapping[str, Any], Tuple[str, str]]]

_logger = logging.getLogger(__name__)


def resolve_credential(credential_provider: CredentialProvider) -> Credential:
    credential = credential_provider()
    if isinstance(credential, Mapping):
        credential = Credential.model_validate(credential)
    if credential is None or not credential.is_complete():
        raise MissingCredential("Alibaba Cloud API credentials are missing.")
    return credential


def _as_parameters(value) -> RequestParameters:
    if isinstance(value, RequestParameters):
        return value
    if isinstance(value, tuple):
        model_name, prompt = value
        return RequestParameters(model_name=model_name, prompt=prompt)
    return RequestParameters.model_validate(value)


def forward_one(client: QwenClient, credential: Credential, params: RequestParameters) -> CallResult:
    try:
        payload = client.chat(credential, params.model_name, params.prompt)
    except RemoteCallFailure as e:
        return CallResult.failure(e.to_error_value())
    return CallResult.success(payload)


def process(
    records: Sequence[Union[Record, Mapping[str, Any]]],
    credential_provider: CredentialProvider,
    param_provider: ParamProvider,
    *,
    client: Optional[QwenClient] = None,
    logger: Optional[logging.Logger] = None,
) -> List[Record]:
    log = logger or _logger
    credential = resolve_credential(credential_provider)
    # 宿主原始 dict 先统一校验为 Record，非法记录在发出请求前报错
    records = [r if isinstance(r, Record) else Record.model_validate(r) for r in records]
    log.debug(f"使用凭证 {mask_secret(credential.key_id.get_secret_value())}，共 {len(records)} 条记录")

    close_after = client is None
    if client is None:
        client = QwenClient()
    try:
        out: List[Record] = []
        for i, record in enumerate(records):
            params = _as_parameters(param_provider(i))
            cat = category_of(params.model_name)
            log.info(f"第 {i + 1}/{len(records)} 条：调用 {params.model_name}（分类: {cat.value if cat else '未收录'}）")
            result = forward_one(client, credential, params)
            if result.ok:
                log.info(f"第 {i + 1} 条调用成功")
            else:
                log.warning(f"第 {i + 1} 条调用失败: {result.error}")
            out.append(result.apply(record))
        return out
    finally:
        if close_after:
            client.close()
