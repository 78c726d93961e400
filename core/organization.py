"""信贷机构：登记簿的外观层"""
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from config.constants import BORROWERS_COLUMNS, PAYMENTS_COLUMNS
from config.settings import DEFAULT_CAPACITY
from core.borrower import BorrowerRecord
from core.ledger import Payment
from core.registry import BorrowerRegistry


class CreditOrganization:

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._registry = BorrowerRegistry(capacity)

    @classmethod
    def from_file(cls, filepath: Union[str, Path], capacity: int = DEFAULT_CAPACITY) -> "CreditOrganization":
        org = cls(capacity)
        org.load(filepath)
        return org

    @property
    def registry(self) -> BorrowerRegistry:
        return self._registry

    @property
    def capacity(self) -> int:
        return self._registry.capacity

    # ---- 借款人 ----

    def add_borrower(self, borrower: Union[BorrowerRecord, str]) -> bool:
        if isinstance(borrower, str):
            borrower = BorrowerRecord(borrower)
        return self._registry.append(borrower)

    def remove_borrower(self, last_name: str) -> bool:
        return self._registry.remove_by_first_match(last_name)

    def find_borrower(self, last_name: str) -> Optional[BorrowerRecord]:
        return self._registry.find_by_first_match(last_name)

    def borrower_names(self) -> List[str]:
        return [b.last_name for b in self._registry]

    # ---- 还款 ----

    def add_payment(self, last_name: str, when: date, amount: float) -> bool:
        b = self.find_borrower(last_name)
        if b is None:
            return False
        b.add_payment(Payment(when, float(amount)))
        return True

    def remove_payment(self, last_name: str, when: date) -> bool:
        b = self.find_borrower(last_name)
        if b is None:
            return False
        return b.remove_payment(when)

    def borrower_balance(self, last_name: str) -> Optional[float]:
        b = self.find_borrower(last_name)
        return None if b is None else b.balance

    def payments_of(self, last_name: str) -> List[Payment]:
        b = self.find_borrower(last_name)
        if b is None:
            return []
        return list(b.ledger.entries_in_order())

    def total_credits(self) -> float:
        total = 0.0
        for i in range(self._registry.size):
            total += self._registry.at(i).balance
        return total

    # ---- 持久化 ----

    def save(self, filepath: Union[str, Path]) -> None:
        self._registry.save(filepath)

    def load(self, filepath: Union[str, Path]) -> None:
        self._registry.load(filepath)

    # ---- 表格视图 ----

    def borrowers_frame(self) -> pd.DataFrame:
        """借款人汇总表：姓名、余额、还款笔数"""
        rows = [
            {"last_name": b.last_name, "balance": b.balance, "payment_count": b.ledger.count()}
            for b in self._registry
        ]
        return pd.DataFrame(rows, columns=BORROWERS_COLUMNS)

    def payments_frame(self, last_name: Optional[str] = None) -> pd.DataFrame:
        """还款明细表，按登记簿顺序、账本顺序排列；指定姓名时只取该借款人"""
        if last_name is None:
            borrowers = list(self._registry)
        else:
            b = self.find_borrower(last_name)
            borrowers = [] if b is None else [b]
        rows = [
            {"last_name": b.last_name, "date": p.date, "amount": p.amount}
            for b in borrowers
            for p in b.ledger.entries_in_order()
        ]
        return pd.DataFrame(rows, columns=PAYMENTS_COLUMNS)
