"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Vector/Rect/Segment: 几何基础
- Edge: 方向边（HorizontalEdge/VerticalEdge 按 kind 区分）
- Cell/CellPosition: 单元格与位置标签
- SelectionState/EditorState: 交互状态
- ExtractedDocument: 文档提取结果
"""

from .cell import Cell, CellPosition
from .document import ExtractedDocument
from .edge import Edge, EdgeKind, HorizontalEdge, VerticalEdge
from .editor_state import EditorState, SelectionState
from .geometry import DOWN, LEFT, RIGHT, UP, Rect, Segment, Vector

__all__ = [
    "Vector",
    "Rect",
    "Segment",
    "RIGHT",
    "DOWN",
    "LEFT",
    "UP",
    "Edge",
    "EdgeKind",
    "HorizontalEdge",
    "VerticalEdge",
    "Cell",
    "CellPosition",
    "SelectionState",
    "EditorState",
    "ExtractedDocument",
]
