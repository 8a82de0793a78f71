"""
网格模块 - 边分类/选择状态机/导出

子模块：
- edge_classifier: 细长矩形 -> 方向边
- selection_engine: 最近边查询、槽位选择、单元格组装、标签推断与级联重编号
- exporter: 单元格导出
"""

from .edge_classifier import EdgeClassifier
from .exporter import CellExporter
from .selection_engine import SelectionEngine

__all__ = [
    "EdgeClassifier",
    "SelectionEngine",
    "CellExporter",
]
