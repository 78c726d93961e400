"""定长借款人登记簿"""
import logging
import math
from pathlib import Path
from typing import Iterator, List, Optional, Union

from config.settings import STORE_ENCODING
from core.borrower import BorrowerRecord
from core.exceptions import MalformedValueError, StoreEncodingError
from core.ledger import Payment
from data_manager.text_store import render_document, parse_document

logger = logging.getLogger(__name__)


class BorrowerRegistry:
    """
    容量固定的借款人登记簿。
    记录从下标 0 开始连续存放，按加入顺序排列；删除时后续记录整体左移一位。
    不检查姓名唯一性，查找/删除只作用于第一个匹配项。
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._slots: List[Optional[BorrowerRecord]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def append(self, record: BorrowerRecord) -> bool:
        """满员时返回 False，不做任何修改"""
        if self._size >= self._capacity:
            return False
        self._slots[self._size] = record
        self._size += 1
        return True

    def remove_by_first_match(self, last_name: str) -> bool:
        for i in range(self._size):
            if self._slots[i].last_name == last_name:
                for j in range(i, self._size - 1):
                    self._slots[j] = self._slots[j + 1]
                self._slots[self._size - 1] = None
                self._size -= 1
                return True
        return False

    def find_by_first_match(self, last_name: str) -> Optional[BorrowerRecord]:
        for i in range(self._size):
            if self._slots[i].last_name == last_name:
                return self._slots[i]
        return None

    def at(self, index: int) -> Optional[BorrowerRecord]:
        if index < 0 or index >= self._size:
            return None
        return self._slots[index]

    def clear(self) -> None:
        for i in range(self._size):
            self._slots[i] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[BorrowerRecord]:
        for i in range(self._size):
            yield self._slots[i]

    # ---- 持久化 ----

    def serialize(self) -> str:
        return render_document(self)

    def deserialize(self, text: str) -> None:
        """
        用文档内容替换登记簿。
        先完整解析校验，出错时登记簿保持原状；超出容量的借款人被丢弃，
        引用未知借款人的还款行被丢弃。
        """
        doc = parse_document(text)

        records: List[BorrowerRecord] = []
        first_by_name = {}
        for row in doc.borrowers:
            if len(records) >= self._capacity:
                logger.debug("capacity %d reached, dropping borrower %r (line %d)",
                             self._capacity, row.last_name, row.line_number)
                continue
            record = BorrowerRecord(row.last_name)
            records.append(record)
            first_by_name.setdefault(row.last_name, record)

        for row in doc.payments:
            target = first_by_name.get(row.last_name)
            if target is None:
                logger.debug("dropping payment for unknown borrower %r (line %d)",
                             row.last_name, row.line_number)
                continue
            try:
                target.add_payment(Payment(row.date, row.amount))
            except ValueError as e:
                raise MalformedValueError(
                    row.line_number,
                    f"{row.last_name} {row.date.isoformat()} {row.amount}",
                    "balance overflow",
                ) from e

        # 全部回放成功后才替换原有内容
        self.clear()
        for record in records:
            self.append(record)

        # 文件中的余额只作参考，余额以回放的还款为准
        for record, row in zip(self, doc.borrowers):
            if not math.isclose(record.balance, row.recorded_total, abs_tol=0.005):
                logger.warning("borrower %r: recorded total %s differs from payment sum %s",
                               row.last_name, row.recorded_total, record.balance)

    def save(self, filepath: Union[str, Path]) -> None:
        text = self.serialize()
        with open(filepath, "w", encoding=STORE_ENCODING, newline="\n") as f:
            f.write(text)

    def load(self, filepath: Union[str, Path]) -> None:
        try:
            with open(filepath, "r", encoding=STORE_ENCODING) as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise StoreEncodingError(filepath, e.reason) from e
        self.deserialize(text)
