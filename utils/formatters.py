import math
import re

import numpy as np

from config.settings import AMOUNT_PRECISION

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def fmt_amount(value: float, unit: str = "руб.") -> str:
    """格式化金额：1234567.89 -> 1,234,567.89 руб."""
    return f"{value:,.{AMOUNT_PRECISION}f} {unit}"


def fmt_plain_decimal(value: float) -> str:
    """文件中使用的数值格式：定点表示、'.' 小数点、最短可还原位数

    25000 -> 25000.0, 0.1 -> 0.1, 1e16 -> 10000000000000000.0
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot store non-finite amount: {value}")
    return np.format_float_positional(value, unique=True, trim="0")


def parse_plain_decimal(text: str) -> float:
    """解析文件中的数值，拒绝 nan / inf、下划线分组和 ',' 小数点"""
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite amount: {text}")
    return value
