"""两段式文本存储格式：借款人段 + 还款段"""
import logging
from typing import Iterable, List, Optional

from config.constants import (
    SECTION_BORROWERS, SECTION_PAYMENTS, FIELD_SEPARATOR,
    BORROWER_FIELDS, PAYMENT_FIELDS,
)
from core.borrower import BorrowerRecord
from core.exceptions import MissingSectionError, MalformedValueError
from data_manager.schema import BorrowerRow, PaymentRow, StoreDocument
from utils.date_utils import parse_iso_date, format_iso_date
from utils.formatters import fmt_plain_decimal, parse_plain_decimal

logger = logging.getLogger(__name__)


def render_document(records: Iterable[BorrowerRecord]) -> str:
    """生成完整文档：先写全部借款人，再按借款人分组写全部还款"""
    records = list(records)
    lines = [SECTION_BORROWERS]
    for b in records:
        lines.append(FIELD_SEPARATOR.join([b.last_name, fmt_plain_decimal(b.balance)]))

    lines.append("")
    lines.append(SECTION_PAYMENTS)
    for b in records:
        for p in b.ledger.entries_in_order():
            lines.append(FIELD_SEPARATOR.join([
                b.last_name, format_iso_date(p.date), fmt_plain_decimal(p.amount),
            ]))
    return "\n".join(lines) + "\n"


def _find_marker(lines: List[str], marker: str) -> Optional[int]:
    for i, line in enumerate(lines):
        if line.strip() == marker:
            return i
    return None


def parse_document(text: str) -> StoreDocument:
    """
    解析整个文档，不修改任何登记簿。
    - 缺少分节标记（或顺序颠倒）: MissingSectionError
    - 字段数不对的行: 跳过
    - 日期/金额无法解析: MalformedValueError（整体失败）
    """
    lines = text.splitlines()
    b_idx = _find_marker(lines, SECTION_BORROWERS)
    p_idx = _find_marker(lines, SECTION_PAYMENTS)

    missing = [m for m, idx in ((SECTION_BORROWERS, b_idx), (SECTION_PAYMENTS, p_idx)) if idx is None]
    if missing:
        raise MissingSectionError(missing)
    if p_idx < b_idx:
        raise MissingSectionError(
            [SECTION_BORROWERS],
            f"Файл повреждён: секция {SECTION_PAYMENTS} расположена перед {SECTION_BORROWERS}",
        )

    doc = StoreDocument()

    for i in range(b_idx + 1, p_idx):
        line = lines[i].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != BORROWER_FIELDS:
            logger.debug("skipping borrower line %d: %r", i + 1, line)
            doc.skipped_lines.append(i + 1)
            continue
        name, total_text = parts
        try:
            total = parse_plain_decimal(total_text)
        except ValueError as e:
            raise MalformedValueError(i + 1, line, "bad total") from e
        doc.borrowers.append(BorrowerRow(name, total, i + 1))

    for i in range(p_idx + 1, len(lines)):
        line = lines[i].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != PAYMENT_FIELDS:
            logger.debug("skipping payment line %d: %r", i + 1, line)
            doc.skipped_lines.append(i + 1)
            continue
        name, date_text, amount_text = parts
        try:
            when = parse_iso_date(date_text)
        except ValueError as e:
            raise MalformedValueError(i + 1, line, "bad date") from e
        try:
            amount = parse_plain_decimal(amount_text)
        except ValueError as e:
            raise MalformedValueError(i + 1, line, "bad amount") from e
        doc.payments.append(PaymentRow(name, when, amount, i + 1))

    return doc
