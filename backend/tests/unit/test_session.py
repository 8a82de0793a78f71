"""
编辑会话单元测试

每个模块完成后必须运行：pytest tests/unit/test_session.py -v
"""

import asyncio
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cellmark.config import RuntimeConfig
from cellmark.interfaces import DocumentLoadError, ExportError, SessionStateError
from cellmark.models import EdgeKind, Rect
from cellmark.pipeline import EditorSession


class FakeHandle:
    """显示资源句柄"""

    def __init__(self) -> None:
        self.released = False

    def release(self) -> None:
        self.released = True


class TestEditorSession:
    """编辑会话测试"""

    @pytest.fixture
    def session(self, runtime_config: RuntimeConfig) -> EditorSession:
        return EditorSession(runtime_config)

    def test_not_loaded(self, session: EditorSession):
        assert not session.loaded
        assert session.to_document_point(1, 1) is None
        with pytest.raises(SessionStateError):
            session.export_cells()

    def test_load_document(self, session: EditorSession, frame_svg: str):
        """测试加载并生成边（4个边框标记 x 4条边）"""
        state = session.load_document(frame_svg)
        assert (state.width, state.height) == (100, 100)
        assert len(state.edges) == 16
        assert state.cells == []

    def test_load_failure_keeps_state(self, session: EditorSession, frame_svg: str):
        """测试加载失败保留原状态且不释放原句柄"""
        handle = FakeHandle()
        state = session.load_document(frame_svg, handle)
        with pytest.raises(DocumentLoadError):
            session.load_document("<svg><path d='M0 0 H'/></svg>", FakeHandle())
        assert session.state is state
        assert not handle.released

    def test_reload_releases_previous_handle(self, session: EditorSession, frame_svg: str):
        first, second = FakeHandle(), FakeHandle()
        session.load_document(frame_svg, first)
        session.load_document(frame_svg, second)
        assert first.released
        assert not second.released

    def test_load_file(self, session: EditorSession, frame_svg: str, temp_dir: Path):
        svg_path = temp_dir / "frame.svg"
        svg_path.write_text(frame_svg, encoding="utf-8")
        assert len(session.load_file(svg_path).edges) == 16
        with pytest.raises(DocumentLoadError):
            session.load_file(temp_dir / "missing.svg")

    def test_to_document_point(self, session: EditorSession, frame_svg: str):
        """测试显示坐标换算与越界"""
        session.load_document(frame_svg)
        session.set_view_scale(2)
        point = session.to_document_point(100, 50)
        assert (point.x, point.y) == (50, 25)
        assert session.to_document_point(201, 10) is None
        assert session.to_document_point(-1, 10) is None

    def test_click_flow(self, session: EditorSession, frame_svg: str, frame_clicks):
        """测试四次点击生成单元格并导出"""
        session.load_document(frame_svg)
        results = [session.click(*frame_clicks[k]) for k in ["top", "left", "bottom", "right"]]
        cell = results[-1]
        assert cell.rect == Rect(x=10, y=10, width=80, height=80)
        assert cell.name == "1"

        with pytest.raises(ExportError):
            session.export_cells()

        session.rename_cell(cell.id, "a1")
        exported = session.export_cells()
        assert json.loads(exported) == {"a1": {"x": 10.0, "y": 10.0, "width": 80.0, "height": 80.0}}
        assert session.export_cells() == exported

    def test_click_scaled_view(self, session: EditorSession, frame_svg: str, frame_clicks):
        """测试缩放视图下点击（阈值随缩放换算）"""
        session.load_document(frame_svg)
        session.set_view_scale(4)
        for kind in ["bottom", "right", "left"]:
            x, y = frame_clicks[kind]
            assert session.click(x * 4, y * 4) is None
        x, y = frame_clicks["top"]
        assert session.click(x * 4, y * 4).rect == Rect(x=10, y=10, width=80, height=80)

    def test_click_off_image(self, session: EditorSession, frame_svg: str):
        session.load_document(frame_svg)
        assert session.click(500, 500) is None
        assert session.state.selection.empty_kinds() == set(EdgeKind)

    def test_keep_vertical_toggle(self, session: EditorSession, frame_svg: str, frame_clicks):
        session.load_document(frame_svg)
        session.set_keep_vertical_selection(True)
        for point in frame_clicks.values():
            session.click(*point)
        assert session.state.selection.left is not None
        session.clear_selection(EdgeKind.LEFT)
        assert session.state.selection.left is None

    def test_rename_and_delete_unknown(self, session: EditorSession, frame_svg: str):
        session.load_document(frame_svg)
        assert session.rename_cell(99, "a1") is None
        assert not session.delete_cell(99)

    def test_delete_cell(self, session: EditorSession, frame_svg: str, frame_clicks):
        session.load_document(frame_svg)
        for point in frame_clicks.values():
            cell = session.click(*point)
        assert session.delete_cell(cell.id)
        assert session.state.cells == []

    def test_view_validation(self, session: EditorSession):
        """测试视图参数校验"""
        with pytest.raises(ValidationError):
            session.set_view_scale(0.5)
        with pytest.raises(ValidationError):
            session.set_brightness(1.5)
        session.set_brightness(0.3)
        assert session.config.view.brightness == 0.3

    def test_view_settings_isolated(self, runtime_config: RuntimeConfig):
        """测试视图设置只作用于本会话"""
        first = EditorSession(runtime_config)
        second = EditorSession(runtime_config)
        first.set_view_scale(3)
        first.set_brightness(0.2)
        first.set_keep_vertical_selection(True)

        assert runtime_config.view.scale == 1.0
        assert runtime_config.selection.keep_vertical_selection is False
        assert second.config.view.scale == 1.0
        assert second.config.view.brightness == 1.0
        assert second.engine.keep_vertical_selection is False
        assert second.config.max_document_distance() == 50
        assert first.config.max_document_distance() == pytest.approx(50 / 3)

    def test_pointer_moved_highlight(self, session: EditorSession, frame_svg: str):
        """测试指针移动限频更新高亮"""
        session.load_document(frame_svg)

        async def scenario() -> None:
            session.pointer_moved(50, 11)
            assert session.state.highlighted.kind == EdgeKind.BOTTOM
            session.pointer_moved(89, 50)
            session.pointer_moved(11, 50)
            assert session.state.highlighted.kind == EdgeKind.BOTTOM
            await session.pointer.wait_idle()
            assert session.state.highlighted.kind == EdgeKind.RIGHT
            session.pointer_left()
            await session.pointer.wait_idle()
            assert session.state.highlighted is None

        asyncio.run(scenario())

    def test_highlight_rect(self, session: EditorSession, frame_svg: str):
        session.load_document(frame_svg)
        assert session.highlight_rect() is None
        session.set_view_scale(2)
        session.engine.update_highlight(session.state, session.to_document_point(100, 22), 50)
        # bottom 边 y=10，高亮画在线下方，厚度2，显示坐标放大2倍
        assert session.highlight_rect() == Rect(x=16, y=20, width=168, height=4)
