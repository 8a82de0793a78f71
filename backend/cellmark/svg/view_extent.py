"""
坐标范围解析器 - 解析根元素的 viewBox 属性

viewBox 由4个空白分隔的数字组成（left top right bottom）；
仅支持原点为 (0,0) 的范围，其余情况显式拒绝。
"""

from __future__ import annotations

import math
import re
from xml.etree import ElementTree as ET

from ..interfaces import ViewExtentError
from ..models import Rect

_WHITESPACE_RE = re.compile(r"\s+")


class ViewExtentResolver:
    """坐标范围解析器"""

    attribute = "viewBox"

    def resolve(self, root: ET.Element) -> Rect:
        """
        从根元素解析坐标范围

        Raises:
            ViewExtentError: 缺失/格式错误/非原点
        """
        value = root.get(self.attribute)
        if value is None:
            raise ViewExtentError(f"缺少 {self.attribute} 属性")
        return self.parse(value)

    def parse(self, value: str) -> Rect:
        chunks = _WHITESPACE_RE.split(value.strip())
        if len(chunks) != 4:
            raise ViewExtentError(f"{self.attribute} 应为4个数字: {value!r}")

        left, top, right, bottom = (self._parse_number(c, value) for c in chunks)

        if left != 0 or top != 0:
            raise ViewExtentError(f"暂不支持非原点的 {self.attribute}: {value!r}")

        return Rect(x=left, y=top, width=right - left, height=bottom - top)

    def _parse_number(self, chunk: str, value: str) -> float:
        try:
            number = float(chunk)
        except ValueError:
            raise ViewExtentError(f"{self.attribute} 含非数字 {chunk!r}: {value!r}") from None
        if not math.isfinite(number):
            raise ViewExtentError(f"{self.attribute} 含非有限数 {chunk!r}: {value!r}")
        return number
