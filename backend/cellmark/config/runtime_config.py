"""
运行期配置 - 读取 documents/cellmark_runtime.yaml

职责：
- 加载视图/选择/检测/限频/导出/日志等运行参数
- 提供环境变量覆盖机制
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_PATH = Path("documents/cellmark_runtime.yaml")


class ViewConfig(BaseModel):
    """视图配置（赋值时校验）"""

    scale: float = Field(1.0, ge=1.0, description="视图缩放倍数")
    brightness: float = Field(1.0, ge=0.0, le=1.0, description="底图亮度（仅显示）")

    model_config = {"validate_assignment": True}


class SelectionConfig(BaseModel):
    """选择配置"""

    keep_vertical_selection: bool = False
    max_pixel_distance: float = Field(50.0, gt=0, description="屏幕像素距离阈值")
    highlight_thickness: float = 2.0

    model_config = {"validate_assignment": True}


class DetectionConfig(BaseModel):
    """检测配置"""

    min_elongation: float = Field(11.0, description="边框标记最小长宽比")
    alignment_threshold: float = Field(0.999, description="轴对齐余弦相似度下限")


class ThrottleConfig(BaseModel):
    """指针限频配置"""

    interval_ms: int = 50


class ExportConfig(BaseModel):
    """导出配置"""

    indent: int = 2


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    view: ViewConfig = Field(default_factory=ViewConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    throttle: ThrottleConfig = Field(default_factory=ThrottleConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "CELLMARK_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """环境变量优先于构造参数（即YAML取值）"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以字典传入，便于与环境变量逐项合并
        return cls(**{
            key: cls._extract(runtime_opts, key)
            for key in ("view", "selection", "detection", "throttle", "export", "logging")
        })

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    @property
    def throttle_interval_sec(self) -> float:
        return self.throttle.interval_ms / 1000.0

    def max_document_distance(self) -> float:
        """屏幕像素阈值换算为文档坐标阈值"""
        return self.selection.max_pixel_distance / self.view.scale


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
