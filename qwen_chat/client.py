import logging
from typing import Any, Dict, Optional

import requests

from model import Credential
from utils.tool import create_session, decode_body, is_valid_url

from .errors import RemoteCallFailure


API_HOST = "https://api.alibabacloud.com"
CHAT_PATH_TEMPLATE = "/v1/models/{model_name}/chat"

logger = logging.getLogger(__name__)


def build_headers(credential: Credential) -> Dict[str, str]:
    key_id = credential.key_id.get_secret_value() if credential.key_id else ""
    key_secret = credential.key_secret.get_secret_value() if credential.key_secret else ""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {key_id}:{key_secret}",
    }


class QwenClient:
    """
    通义千问 chat 接口客户端（requests 同步）。

    每次 chat 只发一次请求：不重试、不退避。timeout 为 None 时沿用 requests 默认（不超时）。
    """

    def __init__(
        self,
        api_host: str = API_HOST,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if not is_valid_url(api_host):
            raise ValueError(f"无效的 API 地址: {api_host!r}")
        self.api_host = api_host.rstrip("/")
        self.timeout = timeout
        self._own_session = session is None
        self.session = session if session is not None else create_session()

    def build_url(self, model_name: str) -> str:
        # 模型名原样代入路径，不做校验
        return self.api_host + CHAT_PATH_TEMPLATE.format(model_name=model_name)

    def chat(self, credential: Credential, model_name: str, prompt: str) -> Any:
        """POST {"prompt": prompt}，2xx 返回解析后的响应体，否则抛出 RemoteCallFailure"""
        url = self.build_url(model_name)
        logger.debug(f"POST {url}")
        try:
            resp = self.session.post(
                url,
                json={"prompt": prompt},
                headers=build_headers(credential),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RemoteCallFailure(str(e) or e.__class__.__name__) from e

        if not 200 <= resp.status_code < 300:
            raise RemoteCallFailure(
                f"Request failed with status code {resp.status_code}",
                payload=decode_body(resp),
                status_code=resp.status_code,
            )
        return decode_body(resp)

    def close(self) -> None:
        if self._own_session:
            self.session.close()

    def __enter__(self) -> "QwenClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
