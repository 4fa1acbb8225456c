import requests
from typing import Optional, Dict, Any
from urllib.parse import urlparse
import logging


logger = logging.getLogger(__name__)


# 默认请求头（JSON 接口）
DEFAULT_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
    'User-Agent': 'qwen-model-node/0.1',
}


def create_session(headers: Optional[Dict[str, str]] = None, no_proxy: bool = False) -> requests.Session:
    """
    创建 requests 会话。
    - headers 为空时使用 DEFAULT_HEADERS
    - no_proxy=True 时不读取环境代理
    """
    session = requests.Session()
    session.headers.update(headers if headers is not None else DEFAULT_HEADERS)
    session.trust_env = not no_proxy
    return session


def decode_body(resp: requests.Response) -> Any:
    """响应体优先按 JSON 解析，失败时回退原始文本；空响应返回 None"""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def mask_secret(value: Optional[str], keep: int = 4) -> str:
    """日志中标识密钥时使用，只保留前 keep 位"""
    if not value:
        return '<empty>'
    if len(value) <= keep:
        return '*' * len(value)
    return value[:keep] + '*' * (len(value) - keep)


def is_valid_url(url: str) -> bool:
    """校验 URL 是否有效"""
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False
