"""借款人"""
import math
from dataclasses import dataclass, field
from datetime import date

from core.ledger import Payment, PaymentLedger


@dataclass(eq=False)
class BorrowerRecord:
    last_name: str  # 区分大小写，不得包含空白字符
    ledger: PaymentLedger = field(default_factory=PaymentLedger)

    def __post_init__(self):
        if not self.last_name or any(ch.isspace() for ch in self.last_name):
            raise ValueError(f"invalid borrower name: {self.last_name!r}")

    @property
    def balance(self) -> float:
        """贷款余额 = 账本中全部还款之和"""
        return self.ledger.total()

    def add_payment(self, payment: Payment) -> None:
        """余额溢出为 inf 时拒绝，账本保持不变"""
        if not math.isfinite(self.balance + payment.amount):
            raise ValueError(
                f"payment {payment.amount} would overflow the balance of {self.last_name!r}"
            )
        self.ledger.insert(payment)

    def remove_payment(self, when: date) -> bool:
        return self.ledger.remove_by_date(when)
