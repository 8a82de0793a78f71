"""
几何基础模型 - 向量、矩形、线段

坐标系为文档坐标（x向右、y向下）
"""

from __future__ import annotations

import math

from pydantic import BaseModel


class Vector(BaseModel):
    """点或方向"""
    x: float
    y: float

    model_config = {"frozen": True}

    def __add__(self, other: Vector) -> Vector:
        return Vector(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(x=self.x - other.x, y=self.y - other.y)

    def scale(self, s: float) -> Vector:
        return Vector(x=self.x * s, y=self.y * s)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """相对x轴的角度（弧度，atan2）"""
        return math.atan2(self.y, self.x)

    def normalized(self) -> Vector | None:
        """单位向量；零向量返回None"""
        m = self.magnitude
        if m == 0:
            return None
        return Vector(x=self.x / m, y=self.y / m)

    def distance_to(self, other: Vector) -> float:
        return (other - self).magnitude


RIGHT = Vector(x=1, y=0)
DOWN = Vector(x=0, y=1)
LEFT = Vector(x=-1, y=0)
UP = Vector(x=0, y=-1)


class Rect(BaseModel):
    """轴对齐矩形"""
    x: float
    y: float
    width: float
    height: float

    model_config = {"frozen": True}

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def elongation(self) -> float:
        """长边/短边；短边为0时返回inf"""
        longer = max(self.width, self.height)
        shorter = min(self.width, self.height)
        if shorter <= 0:
            return math.inf
        return longer / shorter

    def spans_x(self, x: float) -> bool:
        """水平区间是否包含x（含端点）"""
        return self.x <= x <= self.right

    def scaled(self, s: float) -> Rect:
        return Rect(x=self.x * s, y=self.y * s, width=self.width * s, height=self.height * s)

    def normalized(self) -> Rect:
        """宽高取正（负宽高时平移原点）"""
        x, width = (self.x, self.width) if self.width >= 0 else (self.x + self.width, -self.width)
        y, height = (self.y, self.height) if self.height >= 0 else (self.y + self.height, -self.height)
        return Rect(x=x, y=y, width=width, height=height)


class Segment(BaseModel):
    """有向线段（仅用于距离查询）"""
    start: Vector
    end: Vector

    model_config = {"frozen": True}

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def closest_point(self, p: Vector) -> Vector:
        """p在线段上的投影点（投影长度截断到[0, length]）"""
        direction = (self.end - self.start).normalized()
        if direction is None:
            return self.start
        mag = (p - self.start).dot(direction)
        mag = min(max(mag, 0.0), self.length)
        return self.start + direction.scale(mag)

    def distance_to(self, p: Vector) -> float:
        return p.distance_to(self.closest_point(p))
