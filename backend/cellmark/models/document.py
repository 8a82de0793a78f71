"""
文档提取结果模型
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .geometry import Rect


class ExtractedDocument(BaseModel):
    """文档提取结果：候选矩形 + 坐标范围"""
    rects: list[Rect] = Field(default_factory=list)
    width: float
    height: float
