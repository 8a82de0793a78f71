"""
四边形重建器 - 将4点闭合点列还原为轴对齐矩形

算法：
1. 求质心，按各点相对质心的角度升序排序（与原始绘制顺序/起点无关）
2. 排序结果依次为 左上/右上/右下/左下（y向下）
3. 四条边方向须分别与 右/下/左/上 的余弦相似度不低于阈值
4. 通过后取对边平均得到 x/y/width/height
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import DOWN, LEFT, RIGHT, UP, Rect, Vector


class QuadReconstructor:
    """四边形重建器"""

    def __init__(self, alignment_threshold: float = 0.999) -> None:
        self.alignment_threshold = alignment_threshold

    def reconstruct(self, points: Sequence[Vector]) -> Rect | None:
        """
        重建矩形

        Args:
            points: 闭合点列

        Returns:
            轴对齐矩形（宽高非负）；非4点或超出旋转容差返回None
        """
        if len(points) != 4:
            return None

        center = Vector(x=0, y=0)
        for p in points:
            center = center + p
        center = center.scale(1 / 4)

        tl, tr, br, bl = sorted(points, key=lambda p: (p - center).angle)

        sides = ((tl, tr, RIGHT), (tr, br, DOWN), (br, bl, LEFT), (bl, tl, UP))
        for start, end, expected in sides:
            if not self._is_aligned(end - start, expected):
                return None

        return Rect(
            x=(tl.x + bl.x) / 2,
            y=(tl.y + tr.y) / 2,
            width=(tr.x - tl.x + br.x - bl.x) / 2,
            height=(bl.y - tl.y + br.y - tr.y) / 2,
        )

    def _is_aligned(self, side: Vector, expected: Vector) -> bool:
        direction = side.normalized()
        if direction is None:
            return False
        return direction.dot(expected) >= self.alignment_threshold
