from typing import Optional, List
from pydantic import BaseModel, Field

from ..node import Record

class NodeResponse(BaseModel):
    items: Optional[List[Record]] = Field(default=None, description="输出记录（与输入等长同序）")
    status: str = Field(default="OK", description="响应状态标识")
    err_code: Optional[str] = Field(default=None, description="错误代码")
    err_info: Optional[str] = Field(default=None, description="错误信息")
