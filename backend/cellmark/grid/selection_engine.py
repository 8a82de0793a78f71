"""
选择状态机 - 最近边查询、方向槽位选择、单元格组装与标签推断

所有操作均为显式状态转换：接收 EditorState 并原地修改，
不持有任何全局状态，便于脱离显示层单独测试。

单元格组装约定（边方向与单元格边界的对应）：
- x = right.x,  width  = left.x - right.x
- y = bottom.y, height = top.y - bottom.y

测试要点：
- test_nearest_skips_filled_slots: 已填槽位的边不参与查询
- test_complete_cell: 四槽齐全生成单元格并清空上下槽位
- test_label_inference: 依据正上方单元格推断标签
- test_rename_cascade: 重命名后同列下方单元格连续编号
"""

from __future__ import annotations

import logging

from ..models import Cell, CellPosition, Edge, EdgeKind, EditorState, Rect, Vector

logger = logging.getLogger(__name__)


class SelectionEngine:
    """选择状态机"""

    def __init__(self, keep_vertical_selection: bool = False) -> None:
        self.keep_vertical_selection = keep_vertical_selection

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------

    def find_nearest_selectable_edge(
        self,
        state: EditorState,
        point: Vector,
        max_distance: float,
    ) -> Edge | None:
        """
        查找最近的可选边

        Args:
            state: 编辑状态
            point: 文档坐标
            max_distance: 文档坐标下的距离阈值（已按视图缩放换算）

        Returns:
            槽位为空的方向中距离最近且小于阈值的边；否则None
        """
        empty_kinds = state.selection.empty_kinds()
        best: Edge | None = None
        best_distance = max_distance
        for edge in state.edges:
            if edge.kind not in empty_kinds:
                continue
            distance = edge.to_segment().distance_to(point)
            if distance < best_distance:
                best_distance = distance
                best = edge
        return best

    def update_highlight(
        self,
        state: EditorState,
        point: Vector | None,
        max_distance: float,
    ) -> Edge | None:
        """更新高亮边（point为None表示指针不在图像上）"""
        if point is None:
            state.highlighted = None
        else:
            state.highlighted = self.find_nearest_selectable_edge(state, point, max_distance)
        return state.highlighted

    # ------------------------------------------------------------------
    # 选择与组装
    # ------------------------------------------------------------------

    def select_edge(
        self,
        state: EditorState,
        point: Vector,
        max_distance: float,
    ) -> Cell | None:
        """
        选择最近的可选边；四槽齐全时组装单元格

        Returns:
            新建的单元格；未完成组装时返回None
        """
        edge = self.find_nearest_selectable_edge(state, point, max_distance)
        if edge is None:
            return None

        state.selection.put(edge)
        if not state.selection.is_complete:
            return None

        return self._complete_cell(state)

    def clear_selection(self, state: EditorState, kind: EdgeKind | None = None) -> None:
        """清空指定槽位（kind为None时清空全部）"""
        if kind is None:
            state.selection.clear_all()
        else:
            state.selection.clear(kind)

    def _complete_cell(self, state: EditorState) -> Cell:
        selection = state.selection
        top, right, bottom, left = selection.top, selection.right, selection.bottom, selection.left
        rect = Rect(
            x=right.x,
            y=bottom.y,
            width=left.x - right.x,
            height=top.y - bottom.y,
        ).normalized()

        cell_id = state.next_id()
        name = self.infer_label(state.cells, rect) or str(cell_id)
        cell = Cell(id=cell_id, name=name, rect=rect)
        state.cells.append(cell)

        state.highlighted = None
        selection.clear(EdgeKind.TOP)
        selection.clear(EdgeKind.BOTTOM)
        if not self.keep_vertical_selection:
            selection.clear(EdgeKind.LEFT)
            selection.clear(EdgeKind.RIGHT)

        logger.info(f"新建单元格 #{cell.id} {cell.name}: {rect.model_dump()}")
        return cell

    # ------------------------------------------------------------------
    # 标签
    # ------------------------------------------------------------------

    @staticmethod
    def infer_label(cells: list[Cell], rect: Rect) -> str | None:
        """
        依据正上方单元格推断标签

        候选：下边界严格在rect上边界之上、且水平区间包含rect水平中心的单元格；
        取下边界最大者（最近的正上方单元格），其标签合法时行号+1。
        """
        center_x = rect.center_x
        above = [c for c in cells if c.rect.bottom < rect.y and c.rect.spans_x(center_x)]
        if not above:
            return None
        nearest = max(above, key=lambda c: c.rect.bottom)
        position = nearest.position
        if position is None:
            return None
        return position.shifted(1).name

    def rename_cell(self, state: EditorState, cell: Cell, name: str) -> None:
        """
        重命名单元格（任意文本均允许）

        新标签合法时级联重编号：上边界严格在本单元格下边界之下、
        且水平区间包含本单元格水平中心的单元格，按纵向位置排序后
        依次赋予 行号+1, +2, ...（同列）。
        """
        cell.name = name
        position = CellPosition.parse(name)
        if position is None:
            return

        center_x = cell.rect.center_x
        below = [
            c for c in state.cells
            if c is not cell and c.rect.y > cell.rect.bottom and c.rect.spans_x(center_x)
        ]
        below.sort(key=lambda c: c.rect.y)
        for rank, other in enumerate(below, start=1):
            other.name = position.shifted(rank).name

        if below:
            logger.info(f"单元格 #{cell.id} 重命名为 {name}，级联重编号 {len(below)} 个")

    def delete_cell(self, state: EditorState, cell: Cell) -> bool:
        """删除单元格（不触发重编号）"""
        for i, existing in enumerate(state.cells):
            if existing is cell:
                del state.cells[i]
                return True
        return False
