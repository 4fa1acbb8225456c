"""
模型目录（静态数据）

分类 -> 有序模型 ID 列表，仅供节点 schema 与目录接口使用，转发逻辑不读取。
"""
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .enums import ModelCategory


CATEGORY_DISPLAY_NAMES: Mapping[ModelCategory, str] = MappingProxyType({
    ModelCategory.PAID: "Paid Models",
    ModelCategory.FREE_TRIAL: "Free Trial Models",
    ModelCategory.REASONING: "Reasoning Models",
    ModelCategory.REASONING_FREE_TRIAL: "Reasoning Free Trial Models",
    ModelCategory.EMBEDDINGS: "Embeddings Models",
    ModelCategory.VISUAL: "Visual Models",
    ModelCategory.VISUAL_FREE_TRIAL: "Visual Free Trial Models",
})


def _unique(ids: Iterable[str]) -> Tuple[str, ...]:
    # 去重（保留顺序）
    seen = set()
    out: List[str] = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return tuple(out)


MODEL_CATALOG: Mapping[ModelCategory, Tuple[str, ...]] = MappingProxyType({
    ModelCategory.PAID: _unique([
        "qwen-max",
        "qwen-plus",
        "qwen-max-latest",
        "qwen-plus-latest",
        "qwen-max-2025-01-25",
        "qwen-plus-2025-01-25",
        "qwen-turbo-latest",
        "qwen-turbo",
        "qwen-turbo-2024-11-01",
        "qvq-max-2025-03-25",
    ]),
    ModelCategory.FREE_TRIAL: _unique([
        "qwen2.5-14b-instruct-1m",
        "qwen2.5-72b-instruct",
        "qwen2.5-32b-instruct",
        "qwen2.5-14b-instruct",
        "qwen2.5-14b-instruct-1m",
        "qwen2.5-7b-instruct",
        "qwen2.5-7b-instruct-1m",
    ]),
    ModelCategory.REASONING: _unique([
        "qwq-plus",
    ]),
    ModelCategory.REASONING_FREE_TRIAL: _unique([
        "qvq-max",
        "qvq-max-latest",
        "qvq-max-2025-03-25",
    ]),
    ModelCategory.EMBEDDINGS: _unique([
        "text-embedding-v3",
    ]),
    ModelCategory.VISUAL: _unique([
        "qwen-vl-max",
        "qwen-vl-plus",
        "qwen2.5-vl-72b-instruct",
    ]),
    ModelCategory.VISUAL_FREE_TRIAL: _unique([
        "qwen2.5-vl-32b-instruct",
        "qwen2.5-vl-7b-instruct",
        "qwen2.5-vl-3b-instruct",
    ]),
})


def _to_category(category: Union[ModelCategory, str]) -> ModelCategory:
    if isinstance(category, ModelCategory):
        return category
    try:
        return ModelCategory(category)
    except ValueError:
        allowed = ", ".join(c.value for c in ModelCategory)
        raise ValueError(f"未知模型分类: {category!r}，允许取值: {allowed}") from None


def models_for(category: Union[ModelCategory, str]) -> Tuple[str, ...]:
    """返回某分类下的模型 ID（有序）"""
    return MODEL_CATALOG[_to_category(category)]


def model_options(category: Union[ModelCategory, str]) -> List[Dict[str, str]]:
    """宿主下拉框选项 [{name, value}]"""
    return [{"name": m, "value": m} for m in models_for(category)]


def all_categories() -> List[Dict[str, str]]:
    return [{"name": CATEGORY_DISPLAY_NAMES[c], "value": c.value} for c in ModelCategory]


def category_of(model_name: str) -> Optional[ModelCategory]:
    """第一个收录该模型的分类；未收录返回 None（不影响调用）"""
    for cat, ids in MODEL_CATALOG.items():
        if model_name in ids:
            return cat
    return None
