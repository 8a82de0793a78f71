"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from cellmark.interfaces import IDocumentExtractor

    class MyExtractor(IDocumentExtractor):
        def extract(self, svg_text: str) -> ExtractedDocument:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Cell, Edge, ExtractedDocument, Rect


# ============================================================================
# SVG 解析模块接口
# ============================================================================

class IDocumentExtractor(ABC):
    """文档提取器接口 - 从SVG中提取候选矩形与坐标范围"""

    @abstractmethod
    def extract(self, svg_text: str) -> ExtractedDocument:
        """
        提取整份文档

        流程：
        1. 解析XML，深度优先收集所有path的d属性
        2. 路径数据 -> 闭合点列 -> 轴对齐矩形（非矩形跳过）
        3. 解析viewBox（必须以原点为起点）

        Args:
            svg_text: SVG文档文本

        Returns:
            候选矩形列表 + 坐标范围宽高

        Raises:
            DocumentLoadError: 文档损坏（XML/路径数据/viewBox 任一非法）
        """
        ...


# ============================================================================
# 网格模块接口
# ============================================================================

class IEdgeClassifier(ABC):
    """边分类器接口 - 将细长矩形归约为方向边"""

    @abstractmethod
    def classify(self, rects: Iterable[Rect]) -> list[Edge]:
        """
        对候选矩形分类

        Args:
            rects: 候选矩形

        Returns:
            方向边列表（每个保留的矩形恰好4条）
        """
        ...


class ICellExporter(ABC):
    """单元格导出器接口"""

    @abstractmethod
    def export(self, cells: Iterable[Cell]) -> str:
        """
        导出单元格为结构化文本

        Args:
            cells: 全部单元格

        Returns:
            按单元格位置排序的 {名称: 矩形} 文本

        Raises:
            ExportError: 存在无法解析的标签
        """
        ...


class IDisplayHandle(Protocol):
    """显示资源句柄协议（由外部显示层提供）"""

    def release(self) -> None:
        """释放资源"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class CellmarkError(Exception):
    """基础异常"""
    pass


class DocumentLoadError(CellmarkError):
    """文档加载错误"""
    pass


class PathDataError(DocumentLoadError):
    """路径数据语法错误"""
    pass


class ViewExtentError(DocumentLoadError):
    """坐标范围（viewBox）缺失/非法/不在原点"""
    pass


class ExportError(CellmarkError):
    """导出错误"""

    def __init__(self, message: str, names: list[str] | None = None) -> None:
        super().__init__(message)
        self.names = names or []


class SessionStateError(CellmarkError):
    """会话状态错误（如未加载文档）"""
    pass
