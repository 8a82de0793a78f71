"""
编辑会话 - 编排文档加载、指针交互、单元格编辑与导出

职责：
1. 加载文档（提取 + 分类），成功后释放旧文档的显示资源并替换状态
2. 显示坐标 -> 文档坐标换算（除以视图缩放，越界视为无位置）
3. 指针移动经限频投递后更新高亮边；点击选择边并组装单元格
4. 单元格重命名/删除、导出

会话只服务单一交互者，不做并发保护：一次交互处理完成后再处理下一次。

测试要点：
- test_load_document: 加载并生成边
- test_load_failure_keeps_state: 加载失败保留原状态
- test_click_flow: 四次点击生成单元格
- test_pointer_moved_highlight: 指针移动限频更新高亮
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import RuntimeConfig, get_config
from ..grid import CellExporter, EdgeClassifier, SelectionEngine
from ..interfaces import (
    DocumentLoadError,
    IDisplayHandle,
    IDocumentExtractor,
    SessionStateError,
)
from ..models import Cell, Edge, EdgeKind, EditorState, Rect, Vector
from ..svg import DocumentExtractor, QuadReconstructor
from .throttle import RateLimitedProjector

logger = logging.getLogger(__name__)


class EditorSession:
    """编辑会话"""

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        extractor: IDocumentExtractor | None = None,
    ) -> None:
        # 视图设置只作用于本会话，不回写传入/全局配置
        self.config = (config or get_config()).model_copy(deep=True)
        detection = self.config.detection
        self.extractor = extractor or DocumentExtractor(
            reconstructor=QuadReconstructor(alignment_threshold=detection.alignment_threshold),
        )
        self.classifier = EdgeClassifier(min_elongation=detection.min_elongation)
        self.engine = SelectionEngine(
            keep_vertical_selection=self.config.selection.keep_vertical_selection,
        )
        self.exporter = CellExporter(indent=self.config.export.indent)
        self.pointer = RateLimitedProjector(
            self.config.throttle_interval_sec, self._apply_pointer,
        )

        self._state: EditorState | None = None
        self._handle: IDisplayHandle | None = None

    # ------------------------------------------------------------------
    # 文档
    # ------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> EditorState:
        if self._state is None:
            raise SessionStateError("尚未加载文档")
        return self._state

    def load_document(self, svg_text: str, handle: IDisplayHandle | None = None) -> EditorState:
        """
        加载文档

        Args:
            svg_text: SVG文本
            handle: 新文档的显示资源句柄（替换时释放旧句柄）

        Raises:
            DocumentLoadError: 文档损坏；此时保留原状态
        """
        try:
            document = self.extractor.extract(svg_text)
        except DocumentLoadError as e:
            logger.error(f"文档加载失败: {e}")
            raise

        edges = self.classifier.classify(document.rects)
        state = EditorState(width=document.width, height=document.height, edges=edges)

        self._release_handle()
        self._handle = handle
        self._state = state
        return state

    def load_file(self, svg_path: Path, handle: IDisplayHandle | None = None) -> EditorState:
        """读取并加载SVG文件"""
        try:
            svg_text = svg_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"文档读取失败: {svg_path}: {e}")
            raise DocumentLoadError(f"SVG读取失败: {svg_path}: {e}") from e
        return self.load_document(svg_text, handle)

    def _release_handle(self) -> None:
        if self._handle is not None:
            self._handle.release()
            self._handle = None

    # ------------------------------------------------------------------
    # 指针交互
    # ------------------------------------------------------------------

    def to_document_point(self, display_x: float, display_y: float) -> Vector | None:
        """显示坐标 -> 文档坐标；不在图像范围内返回None"""
        if not self.loaded:
            return None
        scale = self.config.view.scale
        x, y = display_x / scale, display_y / scale
        if not self.state.contains_point(x, y):
            return None
        return Vector(x=x, y=y)

    def pointer_moved(self, display_x: float, display_y: float) -> None:
        """指针移动（限频更新高亮，需在事件循环中调用）"""
        self.pointer.submit(self.to_document_point(display_x, display_y))

    def pointer_left(self) -> None:
        """指针离开图像"""
        self.pointer.submit(None)

    def _apply_pointer(self, point: Vector | None) -> None:
        if not self.loaded:
            return
        self.engine.update_highlight(self.state, point, self.config.max_document_distance())

    def click(self, display_x: float, display_y: float) -> Cell | None:
        """点击选择边；四边齐全时返回新建单元格"""
        point = self.to_document_point(display_x, display_y)
        if point is None:
            return None
        return self.engine.select_edge(self.state, point, self.config.max_document_distance())

    def clear_selection(self, kind: EdgeKind | None = None) -> None:
        self.engine.clear_selection(self.state, kind)

    # ------------------------------------------------------------------
    # 单元格
    # ------------------------------------------------------------------

    def rename_cell(self, cell_id: int, name: str) -> Cell | None:
        cell = self.state.find_cell(cell_id)
        if cell is None:
            return None
        self.engine.rename_cell(self.state, cell, name)
        return cell

    def delete_cell(self, cell_id: int) -> bool:
        cell = self.state.find_cell(cell_id)
        if cell is None:
            return False
        return self.engine.delete_cell(self.state, cell)

    def export_cells(self) -> str:
        """导出全部单元格（标签非法时抛出 ExportError）"""
        return self.exporter.export(self.state.cells)

    # ------------------------------------------------------------------
    # 视图与配置
    # ------------------------------------------------------------------

    def set_view_scale(self, scale: float) -> None:
        self.config.view.scale = scale

    def set_brightness(self, brightness: float) -> None:
        self.config.view.brightness = brightness

    def set_keep_vertical_selection(self, keep: bool) -> None:
        self.config.selection.keep_vertical_selection = keep
        self.engine.keep_vertical_selection = keep

    def cell_display_rect(self, cell: Cell) -> Rect:
        """单元格在显示坐标下的矩形"""
        return cell.rect.scaled(self.config.view.scale)

    def highlight_rect(self, edge: Edge | None = None) -> Rect | None:
        """高亮边（默认当前高亮边）在显示坐标下的矩形"""
        edge = edge or (self.state.highlighted if self.loaded else None)
        if edge is None:
            return None
        rect = edge.highlight_rect(self.config.selection.highlight_thickness)
        return rect.scaled(self.config.view.scale)
