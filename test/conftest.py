import json
import logging
from typing import Any, List, Optional, Union

import pytest
import requests

from qwen_chat import QwenClient


def make_response(status_code: int, body: Any = None, text: Optional[str] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    elif text is not None:
        resp._content = text.encode("utf-8")
        resp.headers["Content-Type"] = "text/plain"
    else:
        resp._content = b""
    return resp


class FakeSession:
    """按顺序返回预设结果（Response 或异常），并记录每次 post"""

    def __init__(self, outcomes: Optional[List[Union[requests.Response, Exception]]] = None):
        self.outcomes = list(outcomes or [])
        self.calls: List[dict] = []
        self.closed = False

    def queue(self, *outcomes):
        self.outcomes.extend(outcomes)
        return self

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class MockArgs:
    """模拟Args对象用于测试"""
    def __init__(self, input_data=None, credentials=None):
        self.input = input_data or {}
        self.logger = logging.getLogger(__name__)
        self.credentials = credentials


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session) -> QwenClient:
    return QwenClient(session=fake_session)


@pytest.fixture
def patch_client(monkeypatch, fake_session):
    """让插件内部创建的 QwenClient 使用 fake_session"""
    from plugins import qwen_model

    def factory(timeout=None):
        return QwenClient(timeout=timeout, session=fake_session)

    monkeypatch.setattr(qwen_model, "QwenClient", factory)
    return fake_session
