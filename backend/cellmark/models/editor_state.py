"""
编辑状态模型 - 选择槽位与编辑器聚合状态

EditorState 是唯一所有者：持有全部单元格与选择状态；
边列表由文档提取得到，只读，选择槽位仅引用其中的边对象。
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .cell import Cell
from .edge import Edge, EdgeKind, HorizontalEdge, VerticalEdge


class SelectionState(BaseModel):
    """四个方向的选择槽位（每槽至多一条同方向的边）"""
    top: Optional[HorizontalEdge] = None
    right: Optional[VerticalEdge] = None
    bottom: Optional[HorizontalEdge] = None
    left: Optional[VerticalEdge] = None

    @model_validator(mode="after")
    def _check_slot_kinds(self) -> SelectionState:
        for kind in EdgeKind:
            edge = getattr(self, kind.value)
            if edge is not None and edge.kind != kind:
                raise ValueError(f"槽位 {kind.value} 不能放置 {edge.kind.value} 边")
        return self

    def get(self, kind: EdgeKind) -> Edge | None:
        return getattr(self, kind.value)

    def put(self, edge: Edge) -> None:
        """按边方向放入对应槽位"""
        setattr(self, edge.kind.value, edge)

    def clear(self, kind: EdgeKind) -> None:
        setattr(self, kind.value, None)

    def clear_all(self) -> None:
        for kind in EdgeKind:
            self.clear(kind)

    def empty_kinds(self) -> set[EdgeKind]:
        return {kind for kind in EdgeKind if self.get(kind) is None}

    @property
    def is_complete(self) -> bool:
        return not self.empty_kinds()


class EditorState(BaseModel):
    """编辑器状态（静态提取数据 + 交互状态）"""
    # 文档坐标范围
    width: float
    height: float

    # 提取得到的边（只读）
    edges: list[Edge] = Field(default_factory=list)

    # 交互状态
    highlighted: Optional[Edge] = None
    selection: SelectionState = Field(default_factory=SelectionState)
    cells: list[Cell] = Field(default_factory=list)
    counter: int = Field(0, description="创建计数器（单调递增）")

    def next_id(self) -> int:
        """分配新的单元格id"""
        self.counter += 1
        return self.counter

    def find_cell(self, cell_id: int) -> Cell | None:
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None

    def contains_point(self, x: float, y: float) -> bool:
        """点是否落在文档范围内"""
        return 0 <= x <= self.width and 0 <= y <= self.height
