"""
单元格导出器 - 生成 {标签: 矩形} 的JSON文本

规则：
1. 按单元格位置排序（先列后行）
2. 存在无法解析的标签时整体拒绝导出，并指明具体标签
3. 标签重复时同样拒绝导出
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from collections.abc import Iterable

from ..interfaces import ExportError, ICellExporter
from ..models import Cell, Rect

logger = logging.getLogger(__name__)


class CellExporter(ICellExporter):
    """单元格导出器实现"""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def build_mapping(self, cells: Iterable[Cell]) -> dict[str, Rect]:
        """构建有序映射（标签 -> 矩形）"""
        cells = list(cells)

        invalid = [c.name for c in cells if c.position is None]
        if invalid:
            logger.warning(f"导出被阻止，非法标签: {invalid}")
            raise ExportError(f"存在非法单元格标签: {', '.join(invalid)}", invalid)

        duplicates = [name for name, n in Counter(c.name for c in cells).items() if n > 1]
        if duplicates:
            logger.warning(f"导出被阻止，重复标签: {duplicates}")
            raise ExportError(f"存在重复单元格标签: {', '.join(duplicates)}", duplicates)

        ordered = sorted(cells, key=lambda c: c.position.sort_key)
        return {c.name: c.rect for c in ordered}

    def export(self, cells: Iterable[Cell]) -> str:
        mapping = self.build_mapping(cells)
        payload = {name: rect.model_dump(mode="json") for name, rect in mapping.items()}
        logger.info(f"导出单元格 {len(payload)} 个")
        return json.dumps(payload, ensure_ascii=False, indent=self.indent)
