"""
表格单元标注系统 - 后端核心模块

模块结构：
- config/     运行期配置加载
- models/     数据模型定义（几何/边/单元格/编辑状态）
- svg/        SVG 解析（路径数据/闭合形状/矩形重建/坐标范围）
- grid/       边分类、选择状态机、标签推断与导出
- pipeline/   编辑会话编排与限频投递
"""

__version__ = "0.1.0"
