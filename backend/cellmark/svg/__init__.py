"""
SVG 处理模块 - 路径解析/闭合形状还原/矩形重建/坐标范围

子模块：
- path_data: d 属性解析为命令序列
- path_interpreter: 命令序列还原闭合点列
- quad_reconstructor: 4点点列重建轴对齐矩形
- view_extent: viewBox 解析
- document_extractor: 整份文档提取
"""

from .document_extractor import DocumentExtractor
from .path_data import PathCommand, PathCommandKind, parse_path_data
from .path_interpreter import PathInterpreter
from .quad_reconstructor import QuadReconstructor
from .view_extent import ViewExtentResolver

__all__ = [
    "PathCommand",
    "PathCommandKind",
    "parse_path_data",
    "PathInterpreter",
    "QuadReconstructor",
    "ViewExtentResolver",
    "DocumentExtractor",
]
