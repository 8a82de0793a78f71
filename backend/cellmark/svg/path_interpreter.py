"""
路径解释器 - 将一条路径的命令序列还原为闭合点列

规则：
1. M: 丢弃未闭合的点列，从目标点开始新点列
2. L/H/V: 更新当前点并追加到点列
3. Z: 输出当前点列为一个闭合形状，当前点回到子路径起点
4. 任何曲线命令: 立即终止整条路径的提取（不支持曲线边框），
   已输出的闭合形状照常返回
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..models import Vector
from .path_data import PathCommand, PathCommandKind

logger = logging.getLogger(__name__)


class PathInterpreter:
    """路径解释器"""

    def closed_shapes(self, commands: Iterable[PathCommand]) -> Iterator[list[Vector]]:
        """
        逐个产出闭合点列（顺序与命令顺序一致）

        Args:
            commands: 单条路径的命令序列

        Yields:
            闭合点列（首尾重复的闭合顶点已去除）
        """
        x = 0.0
        y = 0.0
        points: list[Vector] = []
        subpath_start = Vector(x=0, y=0)

        for command in commands:
            kind = command.kind

            if kind.is_curve:
                logger.debug(f"遇到曲线命令 {kind.value}，终止该路径的提取")
                return

            if kind == PathCommandKind.MOVE:
                x, y = self._advance(x, y, command)
                points = [Vector(x=x, y=y)]
                subpath_start = points[0]

            elif not points and kind != PathCommandKind.CLOSE:
                # Z之后未经M直接画线：新子路径从当前点开始
                points.append(Vector(x=x, y=y))

            if kind == PathCommandKind.LINE:
                x, y = self._advance(x, y, command)
                points.append(Vector(x=x, y=y))

            elif kind == PathCommandKind.HORIZONTAL_LINE:
                x = x + command.x if command.relative else command.x
                points.append(Vector(x=x, y=y))

            elif kind == PathCommandKind.VERTICAL_LINE:
                y = y + command.y if command.relative else command.y
                points.append(Vector(x=x, y=y))

            elif kind == PathCommandKind.CLOSE:
                if len(points) > 1 and points[-1] == points[0]:
                    points.pop()
                if points:
                    yield points
                points = []
                x, y = subpath_start.x, subpath_start.y

    @staticmethod
    def _advance(x: float, y: float, command: PathCommand) -> tuple[float, float]:
        if command.relative:
            return x + command.x, y + command.y
        return command.x, command.y
