"""
文档提取器 - 从SVG文档中提取全部候选矩形与坐标范围

职责：
1. 深度优先遍历文档，收集所有 path 元素的 d 属性（命中即不再深入）
2. 路径数据 -> 命令 -> 闭合点列 -> 矩形（非矩形跳过，不报错）
3. 解析 viewBox 作为坐标范围

提取为全有或全无：XML/路径数据/viewBox 任一非法即整体失败

测试要点：
- test_extract_frame: 多路径矩形提取
- test_invalid_path_data: 路径数据损坏整体失败
- test_missing_view_box: 缺少坐标范围整体失败
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.etree import ElementTree as ET

from ..interfaces import DocumentLoadError, IDocumentExtractor
from ..models import ExtractedDocument, Rect
from .path_data import parse_path_data
from .path_interpreter import PathInterpreter
from .quad_reconstructor import QuadReconstructor
from .view_extent import ViewExtentResolver

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """去掉命名空间前缀 {ns}path -> path"""
    return tag.rsplit("}", 1)[-1]


class DocumentExtractor(IDocumentExtractor):
    """文档提取器实现"""

    def __init__(
        self,
        interpreter: PathInterpreter | None = None,
        reconstructor: QuadReconstructor | None = None,
        extent_resolver: ViewExtentResolver | None = None,
    ) -> None:
        self.interpreter = interpreter or PathInterpreter()
        self.reconstructor = reconstructor or QuadReconstructor()
        self.extent_resolver = extent_resolver or ViewExtentResolver()

    def extract(self, svg_text: str) -> ExtractedDocument:
        """提取整份文档"""
        try:
            root = ET.fromstring(svg_text)
        except ET.ParseError as e:
            raise DocumentLoadError(f"SVG解析失败: {e}") from e

        path_ds = self.collect_path_data(root)
        rects: list[Rect] = []
        for d in path_ds:
            rects.extend(self.path_to_rects(d))

        extent = self.extent_resolver.resolve(root)

        logger.info(
            f"提取完成: 路径 {len(path_ds)} 条, 矩形 {len(rects)} 个, "
            f"范围 {extent.width}x{extent.height}"
        )
        return ExtractedDocument(rects=rects, width=extent.width, height=extent.height)

    def extract_file(self, svg_path: Path) -> ExtractedDocument:
        """读取并提取SVG文件"""
        if not svg_path.exists():
            raise DocumentLoadError(f"SVG文件不存在: {svg_path}")
        try:
            svg_text = svg_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f"SVG读取失败: {svg_path}: {e}") from e
        return self.extract(svg_text)

    def collect_path_data(self, root: ET.Element) -> list[str]:
        """深度优先收集 path 的 d 属性（文档顺序）"""
        paths: list[str] = []

        def visit(element: ET.Element) -> None:
            if _local_name(element.tag) == "path":
                d = element.get("d")
                if d is not None:
                    paths.append(d)
                    return
            for child in element:
                visit(child)

        visit(root)
        return paths

    def path_to_rects(self, d: str) -> list[Rect]:
        """单条路径 -> 矩形列表（非矩形形状跳过）"""
        commands = parse_path_data(d)
        rects: list[Rect] = []
        for points in self.interpreter.closed_shapes(commands):
            rect = self.reconstructor.reconstruct(points)
            if rect is None:
                logger.debug(f"跳过非矩形形状: {len(points)} 个顶点")
                continue
            rects.append(rect)
        return rects
