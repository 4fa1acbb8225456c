from typing import Optional
from fastapi import HTTPException, Header
from model import Credential, ModelCategory


def parse_category(value: Optional[str], param_name: str = 'category') -> ModelCategory:
    """
    解析模型分类参数。

    Args:
        value: 查询参数原始值（为空时取 paid）
        param_name: 参数名，用于错误信息

    Returns:
        ModelCategory

    Raises:
        HTTPException(400): 非法值时抛出，包含允许值与示例
    """
    if not value or not value.strip():
        return ModelCategory.PAID
    stripped = value.strip()
    valid_values = [e.value for e in ModelCategory]
    if stripped not in valid_values:
        raise HTTPException(
            status_code=400,
            detail=(
                f"参数 {param_name} 存在非法值: {stripped}。 "
                f"允许取值: {', '.join(valid_values)}。 "
                f"示例: {param_name}={valid_values[0]}"
            ),
        )
    return ModelCategory(stripped)


def credential_from_headers(
    x_access_key_id: Optional[str] = Header(default=None),
    x_access_key_secret: Optional[str] = Header(default=None),
) -> Optional[Credential]:
    """从 X-Access-Key-Id / X-Access-Key-Secret 请求头读取凭证；任一缺省时返回 None"""
    if not x_access_key_id or not x_access_key_secret:
        return None
    return Credential(key_id=x_access_key_id, key_secret=x_access_key_secret)
