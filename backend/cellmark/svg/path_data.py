"""
路径数据解析器 - 将 path 的 d 属性解析为命令序列

支持：
- M L H V Z C S Q T A（大写绝对，小写相对）
- 隐式重复（M后多余的坐标对视为同相对性的L）
- 数字：符号/小数点/指数；分隔符：空白，数字之间至多一个逗号
- 弧命令的两个标志位为单字符 0/1（可不加分隔）

语法错误抛出 PathDataError（文档视为损坏）
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..interfaces import PathDataError

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATOR_RE = re.compile(r"\s*,?\s*")
_WHITESPACE_RE = re.compile(r"\s*")
_FLAG_RE = re.compile(r"[01]")


class PathCommandKind(str, Enum):
    """路径命令类型"""
    MOVE = "moveto"
    LINE = "lineto"
    HORIZONTAL_LINE = "horizontal lineto"
    VERTICAL_LINE = "vertical lineto"
    CLOSE = "closepath"
    CURVE = "curveto"
    SMOOTH_CURVE = "smooth curveto"
    QUADRATIC_CURVE = "quadratic curveto"
    SMOOTH_QUADRATIC_CURVE = "smooth quadratic curveto"
    ARC = "elliptical arc"

    @property
    def is_curve(self) -> bool:
        return self in _CURVE_KINDS


_CURVE_KINDS = frozenset({
    PathCommandKind.CURVE,
    PathCommandKind.SMOOTH_CURVE,
    PathCommandKind.QUADRATIC_CURVE,
    PathCommandKind.SMOOTH_QUADRATIC_CURVE,
    PathCommandKind.ARC,
})

# 命令字母 -> (类型, 参数个数)
_COMMANDS: dict[str, tuple[PathCommandKind, int]] = {
    "M": (PathCommandKind.MOVE, 2),
    "L": (PathCommandKind.LINE, 2),
    "H": (PathCommandKind.HORIZONTAL_LINE, 1),
    "V": (PathCommandKind.VERTICAL_LINE, 1),
    "Z": (PathCommandKind.CLOSE, 0),
    "C": (PathCommandKind.CURVE, 6),
    "S": (PathCommandKind.SMOOTH_CURVE, 4),
    "Q": (PathCommandKind.QUADRATIC_CURVE, 4),
    "T": (PathCommandKind.SMOOTH_QUADRATIC_CURVE, 2),
    "A": (PathCommandKind.ARC, 7),
}

# 弧命令参数中的标志位下标（large-arc-flag, sweep-flag）
_ARC_FLAG_INDICES = (3, 4)


@dataclass(frozen=True)
class PathCommand:
    kind: PathCommandKind
    relative: bool
    args: tuple[float, ...] = ()

    @property
    def x(self) -> float:
        """终点x（M/L/T等末尾为坐标对的命令，以及H）"""
        if self.kind == PathCommandKind.HORIZONTAL_LINE:
            return self.args[0]
        return self.args[-2]

    @property
    def y(self) -> float:
        """终点y（末尾为坐标对的命令，以及V）"""
        if self.kind == PathCommandKind.VERTICAL_LINE:
            return self.args[0]
        return self.args[-1]


class _Scanner:
    """按位置扫描d字符串"""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip(self, pattern: re.Pattern[str]) -> None:
        self.pos = pattern.match(self.text, self.pos).end()

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def take(self, pattern: re.Pattern[str]) -> str | None:
        match = pattern.match(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return match.group()

    def error(self, message: str) -> PathDataError:
        return PathDataError(f"路径数据非法（位置 {self.pos}）: {message}: {self.text!r}")


def parse_path_data(d: str) -> list[PathCommand]:
    """
    解析路径数据

    Args:
        d: path 元素的 d 属性

    Returns:
        命令列表（按出现顺序，隐式重复已展开）

    Raises:
        PathDataError: 语法错误
    """
    scanner = _Scanner(d)
    commands: list[PathCommand] = []

    scanner.skip(_WHITESPACE_RE)
    while not scanner.at_end():
        letter = scanner.peek()
        entry = _COMMANDS.get(letter.upper())
        if entry is None:
            raise scanner.error(f"无法识别的命令 {letter!r}")
        kind, arity = entry
        if not commands and kind != PathCommandKind.MOVE:
            raise scanner.error("路径必须以移动命令开始")
        scanner.pos += 1
        relative = letter.islower()

        if arity == 0:
            commands.append(PathCommand(kind, relative))
            scanner.skip(_WHITESPACE_RE)
            continue

        scanner.skip(_WHITESPACE_RE)
        commands.append(PathCommand(kind, relative, _read_args(scanner, kind, arity)))

        # 隐式重复：后续仍为数字则继续读取同一命令（M之后为L）
        repeat_kind = PathCommandKind.LINE if kind == PathCommandKind.MOVE else kind
        while True:
            start = scanner.pos
            scanner.skip(_SEPARATOR_RE)
            if scanner.at_end() or _NUMBER_RE.match(scanner.text, scanner.pos) is None:
                # 逗号只能出现在两个数字之间
                if "," in scanner.text[start:scanner.pos]:
                    raise scanner.error("逗号后缺少参数")
                break
            commands.append(PathCommand(repeat_kind, relative, _read_args(scanner, kind, arity)))

        scanner.skip(_WHITESPACE_RE)

    return commands


def _read_args(scanner: _Scanner, kind: PathCommandKind, arity: int) -> tuple[float, ...]:
    args: list[float] = []
    for i in range(arity):
        if i > 0:
            scanner.skip(_SEPARATOR_RE)
        if kind == PathCommandKind.ARC and i in _ARC_FLAG_INDICES:
            token = scanner.take(_FLAG_RE)
            if token is None:
                raise scanner.error("弧命令标志位必须为0或1")
        else:
            token = scanner.take(_NUMBER_RE)
            if token is None:
                raise scanner.error(f"{kind.value} 缺少第{i + 1}个参数")
        args.append(float(token))
    return tuple(args)
