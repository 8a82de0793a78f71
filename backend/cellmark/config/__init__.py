"""
配置层 - 加载运行期配置

职责：
- 加载 documents/cellmark_runtime.yaml（运行期参数）
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    DetectionConfig,
    ExportConfig,
    LoggingConfig,
    RuntimeConfig,
    SelectionConfig,
    ThrottleConfig,
    ViewConfig,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "ViewConfig",
    "SelectionConfig",
    "DetectionConfig",
    "ThrottleConfig",
    "ExportConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
