from enum import Enum


class ModelCategory(str, Enum):
    """通义千问模型分类枚举"""
    PAID = "paid"                                  # 付费模型
    FREE_TRIAL = "freeTrial"                       # 免费试用
    REASONING = "reasoning"                        # 推理模型
    REASONING_FREE_TRIAL = "reasoningFreeTrial"    # 推理（免费试用）
    EMBEDDINGS = "embeddings"                      # 向量模型
    VISUAL = "visual"                              # 视觉模型
    VISUAL_FREE_TRIAL = "visualFreeTrial"          # 视觉（免费试用）
