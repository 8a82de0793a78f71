"""
路径解释器单元测试

每个模块完成后必须运行：pytest tests/unit/test_path_interpreter.py -v
"""

import pytest

from cellmark.models import Vector
from cellmark.svg import PathInterpreter, parse_path_data


def _shapes(d: str) -> list[list[tuple[float, float]]]:
    interpreter = PathInterpreter()
    return [[(p.x, p.y) for p in shape] for shape in interpreter.closed_shapes(parse_path_data(d))]


class TestPathInterpreter:
    """路径解释器测试"""

    @pytest.fixture
    def interpreter(self) -> PathInterpreter:
        return PathInterpreter()

    def test_absolute_rectangle(self):
        assert _shapes("M8 8 H92 V10 H8 Z") == [[(8, 8), (92, 8), (92, 10), (8, 10)]]

    def test_relative_rectangle(self):
        assert _shapes("m8 90 h84 v2 h-84 z") == [[(8, 90), (92, 90), (92, 92), (8, 92)]]

    def test_vertical_line_does_not_close(self):
        """测试V命令不会提前闭合形状"""
        assert _shapes("M90 8 V92 H92 V8 Z") == [[(90, 8), (90, 92), (92, 92), (92, 8)]]

    def test_explicit_closing_vertex_dropped(self):
        """测试显式回到起点的闭合顶点被去除"""
        assert _shapes("M8 8 L10 8 L10 92 L8 92 L8 8 Z") == [[(8, 8), (10, 8), (10, 92), (8, 92)]]

    def test_multiple_subpaths_in_order(self):
        shapes = _shapes("M0 0 H10 V2 H0 Z M20 0 H30 V2 H20 Z")
        assert len(shapes) == 2
        assert shapes[0][0] == (0, 0)
        assert shapes[1][0] == (20, 0)

    def test_move_discards_open_points(self):
        """测试M丢弃未闭合的点列"""
        assert _shapes("M0 0 H10 V2 M20 0 H30 V2 H20 Z") == [[(20, 0), (30, 0), (30, 2), (20, 2)]]

    def test_unclosed_path_emits_nothing(self):
        assert _shapes("M0 0 H10 V2 H0") == []

    def test_curve_terminates_whole_path(self):
        """测试曲线命令终止整条路径，已闭合形状保留"""
        shapes = _shapes("M0 0 H10 V2 H0 Z M20 0 C1 1 2 2 3 3 Z M30 0 H40 V2 H30 Z")
        assert shapes == [[(0, 0), (10, 0), (10, 2), (0, 2)]]

    def test_relative_move_after_close(self):
        """测试Z后当前点回到子路径起点"""
        shapes = _shapes("M10 10 h5 v1 h-5 z m0 5 h5 v1 h-5 z")
        assert shapes[1][0] == (10, 15)

    def test_line_after_close_starts_at_subpath_start(self):
        shapes = _shapes("M0 0 H10 V2 H0 Z L5 0 L5 5 L0 5 Z")
        assert shapes[1] == [(0, 0), (5, 0), (5, 5), (0, 5)]

    def test_lazy_generation(self, interpreter: PathInterpreter):
        """测试逐个产出"""
        shapes = interpreter.closed_shapes(parse_path_data("M0 0 H1 V1 H0 Z M5 5 H6 V6 H5 Z"))
        first = next(shapes)
        assert first[0] == Vector(x=0, y=0)
