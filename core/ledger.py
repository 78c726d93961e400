"""还款记录与按日期排序的还款账本"""
from bisect import bisect_right
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Payment:
    date: date
    amount: float

    def __str__(self) -> str:
        return f"{self.date.isoformat()}: {self.amount:.2f}"


class PaymentLedger:
    """
    单个借款人的还款账本。
    始终按日期非递减排列；同一日期的多笔还款保持插入顺序。
    """

    def __init__(self, payments: Optional[List[Payment]] = None):
        self._entries: List[Payment] = []
        # 与 _entries 平行的日期键，用于二分查找插入位置
        self._dates: List[date] = []
        for p in payments or []:
            self.insert(p)

    def insert(self, payment: Payment) -> None:
        """插入到所有日期 <= 新日期的记录之后"""
        pos = bisect_right(self._dates, payment.date)
        self._entries.insert(pos, payment)
        self._dates.insert(pos, payment.date)

    def remove_by_date(self, when: date) -> bool:
        """删除该日期的第一笔（最早插入的）还款"""
        pos = self._index_of(when)
        if pos is None:
            return False
        del self._entries[pos]
        del self._dates[pos]
        return True

    def find_by_date(self, when: date) -> Optional[Payment]:
        pos = self._index_of(when)
        if pos is None:
            return None
        return self._entries[pos]

    def total(self) -> float:
        """所有还款金额之和（每次重新计算）"""
        return sum((p.amount for p in self._entries), 0.0)

    def count(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def entries_in_order(self) -> Iterator[Payment]:
        """按存储顺序（日期升序）遍历调用时刻的快照。

        迭代器持有账本条目的副本，遍历期间增删还款不影响本次遍历。
        """
        return iter(list(self._entries))

    def _index_of(self, when: date) -> Optional[int]:
        for i, d in enumerate(self._dates):
            if d == when:
                return i
            if d > when:
                break
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Payment]:
        return self.entries_in_order()

    def __repr__(self) -> str:
        return f"PaymentLedger(count={self.count()}, total={self.total()})"
