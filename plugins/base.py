"""
插件公共基础模块
提供运行时参数容器 Args
"""

from typing import Any, Generic, Optional, TypeVar

# 模拟 runtime.Args 类型
T = TypeVar('T')

class Args(Generic[T]):
    """
    运行时注入的入口参数：
    - input: 输入参数（Input 模型或 dict）
    - logger: 日志记录器
    - credentials: 宿主解析好的凭证（可选）
    """
    def __init__(self, input_data: Optional[T] = None, logger=None, credentials: Any = None):
        self.input = input_data
        self.logger = logger
        self.credentials = credentials
