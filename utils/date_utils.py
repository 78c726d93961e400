import re
from datetime import date, datetime

from config.settings import DATE_FORMAT

# 严格的 YYYY-MM-DD：月、日必须补零
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def parse_iso_date(text: str) -> date:
    """解析 YYYY-MM-DD 日期，格式错误时抛出 ValueError"""
    text = text.strip()
    if not _ISO_DATE_RE.fullmatch(text):
        raise ValueError(f"not a YYYY-MM-DD date: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_iso_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)
