from fastapi import FastAPI
from api import qwen_router


tags_metadata = [
    {"name": "通义千问", "description": "Qwen 模型节点：模型目录、节点元数据与逐条调用"},
]

app = FastAPI(
    title="Qwen 模型节点 API",
    description="把工作流记录逐条转发给阿里云通义千问模型，统一 NodeResponse",
    version="0.1.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "docExpansion": "none",
        "displayRequestDuration": True,
    },
)

# 注册路由
app.include_router(qwen_router, prefix="/api", tags=["通义千问"])
