"""
单元格模型 - 用户确认的网格单元及其位置标签

标签格式：列字母(a-h) + 行号(>=1)，如 "a1"、"h12"
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from .geometry import Rect

_CELL_NAME_RE = re.compile(r"([a-h])([0-9]+)")


class CellPosition(BaseModel):
    """单元格位置（标签解析结果）"""
    column: str = Field(..., description="列字母 a-h")
    row: int = Field(..., ge=1, description="行号")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, name: str) -> CellPosition | None:
        """解析标签；不合法返回None"""
        match = _CELL_NAME_RE.fullmatch(name)
        if not match:
            return None
        column, row_text = match.groups()
        row = int(row_text)
        if row < 1:
            return None
        return cls(column=column, row=row)

    @property
    def name(self) -> str:
        return f"{self.column}{self.row}"

    @property
    def sort_key(self) -> tuple[str, int]:
        """排序键：先列后行"""
        return (self.column, self.row)

    def shifted(self, rows: int) -> CellPosition:
        """同列下移rows行"""
        return CellPosition(column=self.column, row=self.row + rows)


class Cell(BaseModel):
    """单元格（id创建后不变，name可随时编辑）"""
    id: int
    name: str
    rect: Rect

    @property
    def position(self) -> CellPosition | None:
        return CellPosition.parse(self.name)
