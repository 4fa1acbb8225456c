"""通义千问节点 API 路由"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from model import Credential, NodeResponse, all_categories, model_options
from plugins import qwen_model
from plugins.base import Args
from api.param_parsers import parse_category, credential_from_headers


qwen_router = APIRouter()
logger = logging.getLogger(__name__)


@qwen_router.get(
    "/qwen/categories",
    summary="获取模型分类",
)
async def get_categories():
    return all_categories()


@qwen_router.get(
    "/qwen/models",
    summary="获取某分类下的模型列表",
    responses={
        200: {"description": "成功"},
        400: {"description": "请求参数不合法"},
    },
)
async def get_models(
    category: Optional[str] = Query(default=None, description="可选 paid freeTrial reasoning reasoningFreeTrial embeddings visual visualFreeTrial"),
) -> Dict[str, Any]:
    cat = parse_category(category)
    return {"category": cat.value, "models": model_options(cat)}


@qwen_router.get(
    "/qwen/metadata",
    summary="获取节点元数据（参数 schema、凭证要求）",
)
async def get_metadata() -> Dict[str, Any]:
    return qwen_model.Metadata


@qwen_router.post(
    "/qwen/execute",
    response_model=NodeResponse,
    summary="逐条调用通义千问模型",
    description=(
        "对 items 中每条记录调用一次模型，成功写入 response，失败写入 error。\n"
        "凭证可放在请求体 credentials 中，或通过 X-Access-Key-Id / X-Access-Key-Secret 请求头传入（请求头优先）。"
    ),
    responses={
        200: {"description": "成功（单条失败体现在记录的 error 字段）"},
        401: {"description": "凭证缺失"},
        500: {"description": "执行失败"},
    },
)
def execute(
    body: qwen_model.Input,
    header_credential: Optional[Credential] = Depends(credential_from_headers),
) -> NodeResponse:
    args = Args(input_data=body, logger=logger, credentials=header_credential)
    out = qwen_model.handler(args)
    if out.status == "ERROR":
        if out.err_code == "MISSING_CREDENTIAL":
            raise HTTPException(status_code=401, detail=out.err_info or out.err_code)
        raise HTTPException(status_code=500, detail=f"执行失败: {out.err_code or ''} {out.err_info or ''}")
    return NodeResponse(items=out.items, status=out.status)
