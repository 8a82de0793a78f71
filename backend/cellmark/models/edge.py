"""
方向边模型 - 边框标记归约得到的单条线段+方向标签

top/bottom 为水平边（x, y, width），left/right 为竖直边（x, y, height）
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .geometry import Rect, Segment, Vector


class EdgeKind(str, Enum):
    """边方向"""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class HorizontalEdge(BaseModel):
    """水平边（top/bottom）"""
    kind: Literal[EdgeKind.TOP, EdgeKind.BOTTOM]
    x: float
    y: float
    width: float

    model_config = {"frozen": True}

    def to_segment(self) -> Segment:
        return Segment(
            start=Vector(x=self.x, y=self.y),
            end=Vector(x=self.x + self.width, y=self.y),
        )

    def highlight_rect(self, thickness: float) -> Rect:
        """高亮区域：top画在线上方，bottom画在线下方"""
        if self.kind == EdgeKind.TOP:
            return Rect(x=self.x, y=self.y - thickness, width=self.width, height=thickness)
        return Rect(x=self.x, y=self.y, width=self.width, height=thickness)


class VerticalEdge(BaseModel):
    """竖直边（left/right）"""
    kind: Literal[EdgeKind.LEFT, EdgeKind.RIGHT]
    x: float
    y: float
    height: float

    model_config = {"frozen": True}

    def to_segment(self) -> Segment:
        return Segment(
            start=Vector(x=self.x, y=self.y),
            end=Vector(x=self.x, y=self.y + self.height),
        )

    def highlight_rect(self, thickness: float) -> Rect:
        """高亮区域：left画在线左侧，right画在线右侧"""
        if self.kind == EdgeKind.LEFT:
            return Rect(x=self.x - thickness, y=self.y, width=thickness, height=self.height)
        return Rect(x=self.x, y=self.y, width=thickness, height=self.height)


Edge = Annotated[Union[HorizontalEdge, VerticalEdge], Field(discriminator="kind")]
