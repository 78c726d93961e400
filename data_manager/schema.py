from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass
class BorrowerRow:
    last_name: str
    recorded_total: float  # 文件中记录的余额，仅作参考
    line_number: int = 0


@dataclass
class PaymentRow:
    last_name: str
    date: date
    amount: float
    line_number: int = 0


@dataclass
class StoreDocument:
    borrowers: List[BorrowerRow] = field(default_factory=list)
    payments: List[PaymentRow] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)
