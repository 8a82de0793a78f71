"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(frame_state, engine):
        cell = engine.select_edge(frame_state, Vector(x=50, y=11), 50)
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from cellmark.config import RuntimeConfig
from cellmark.grid import EdgeClassifier, SelectionEngine
from cellmark.models import Cell, EditorState, Rect, Vector


# ============================================================================
# SVG Fixtures
# ============================================================================

# 四根边框条围出 (10,10)-(90,90) 的单元格，线宽2；
# 四条路径分别用 绝对H/V、相对h/v、显式闭合L、逆序V/H 绘制
FRAME_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <g id="borders">
    <path d="M8 8 H92 V10 H8 Z"/>
    <path d="m8 90 h84 v2 h-84 z"/>
    <path d="M8,8 L10,8 L10,92 L8,92 L8,8 Z"/>
    <path d="M90 8 V92 H92 V8 Z"/>
  </g>
  <g id="content">
    <path d="M40 40 H60 V60 H40 Z"/>
    <path d="M0 0 C 1 1 2 2 3 3 Z"/>
    <text x="50" y="50">A</text>
  </g>
</svg>
"""

# 文档坐标下四次点击的位置（分别命中各方向的边）
FRAME_CLICKS = {
    "bottom": (50, 11),
    "right": (11, 50),
    "left": (89, 50),
    "top": (50, 89),
}


@pytest.fixture
def frame_svg() -> str:
    """单个单元格边框的SVG"""
    return FRAME_SVG


@pytest.fixture
def frame_clicks() -> dict[str, tuple[float, float]]:
    return dict(FRAME_CLICKS)


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值）"""
    return RuntimeConfig()


# ============================================================================
# 几何/状态 Fixtures
# ============================================================================

def make_bar_rects(
    row_lines: list[float],
    column_lines: list[float],
    thickness: float = 2.0,
) -> list[Rect]:
    """
    生成网格边框条

    row_lines 为各水平条的上沿y，column_lines 为各竖直条的左沿x；
    条带覆盖整个网格范围。
    """
    x0, x1 = column_lines[0], column_lines[-1] + thickness
    y0, y1 = row_lines[0], row_lines[-1] + thickness
    rects = [Rect(x=x0, y=y, width=x1 - x0, height=thickness) for y in row_lines]
    rects += [Rect(x=x, y=y0, width=thickness, height=y1 - y0) for x in column_lines]
    return rects


def make_state(rects: list[Rect], width: float = 200, height: float = 200) -> EditorState:
    edges = EdgeClassifier().classify(rects)
    return EditorState(width=width, height=height, edges=edges)


def make_cell(cell_id: int, name: str, x: float, y: float, width: float, height: float) -> Cell:
    return Cell(id=cell_id, name=name, rect=Rect(x=x, y=y, width=width, height=height))


def click(engine: SelectionEngine, state: EditorState, x: float, y: float, max_distance: float = 50):
    return engine.select_edge(state, Vector(x=x, y=y), max_distance)


@pytest.fixture
def frame_state() -> EditorState:
    """单个单元格 (10,10)-(90,90) 的编辑状态"""
    return make_state(make_bar_rects([8, 90], [8, 90]), width=100, height=100)


@pytest.fixture
def column_state() -> EditorState:
    """单列两行：行边框条上沿 y=8/40/90，列边框条左沿 x=8/90"""
    return make_state(make_bar_rects([8, 40, 90], [8, 90]), width=100, height=100)


@pytest.fixture
def engine() -> SelectionEngine:
    return SelectionEngine()


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
