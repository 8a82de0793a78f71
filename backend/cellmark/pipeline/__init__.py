"""
会话编排模块 - 编辑会话与限频投递

子模块：
- session: 文档加载/指针交互/单元格编辑/导出
- throttle: 单槽信箱限频投递
"""

from .session import EditorSession
from .throttle import RateLimitedProjector

__all__ = [
    "EditorSession",
    "RateLimitedProjector",
]
