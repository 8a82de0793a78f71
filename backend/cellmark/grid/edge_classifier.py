"""
边分类器 - 按长宽比筛选边框标记，并归约为四条方向边

规则：
- 长宽比 = 长边/短边，低于阈值（默认11）的视为普通内容，丢弃
- 保留的矩形输出4条边：top/bottom 取矩形的 x 与 width，
  left/right 取矩形的 y 与 height
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..interfaces import IEdgeClassifier
from ..models import Edge, EdgeKind, HorizontalEdge, Rect, VerticalEdge

logger = logging.getLogger(__name__)


class EdgeClassifier(IEdgeClassifier):
    """边分类器实现"""

    def __init__(self, min_elongation: float = 11.0) -> None:
        self.min_elongation = min_elongation

    def classify(self, rects: Iterable[Rect]) -> list[Edge]:
        edges: list[Edge] = []
        kept = 0
        for rect in rects:
            if not self.is_border_mark(rect):
                continue
            kept += 1
            edges.extend(self.rect_to_edges(rect))
        logger.info(f"边分类完成: 边框标记 {kept} 个, 边 {len(edges)} 条")
        return edges

    def is_border_mark(self, rect: Rect) -> bool:
        if min(rect.width, rect.height) <= 0:
            return False
        return rect.elongation >= self.min_elongation

    @staticmethod
    def rect_to_edges(rect: Rect) -> list[Edge]:
        return [
            HorizontalEdge(kind=EdgeKind.TOP, x=rect.x, y=rect.y, width=rect.width),
            HorizontalEdge(kind=EdgeKind.BOTTOM, x=rect.x, y=rect.bottom, width=rect.width),
            VerticalEdge(kind=EdgeKind.LEFT, x=rect.x, y=rect.y, height=rect.height),
            VerticalEdge(kind=EdgeKind.RIGHT, x=rect.right, y=rect.y, height=rect.height),
        ]
