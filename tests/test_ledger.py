"""还款账本测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dataclasses import FrozenInstanceError
from datetime import date
import pytest

from core.borrower import BorrowerRecord
from core.ledger import Payment, PaymentLedger


def _dates(ledger):
    return [p.date for p in ledger.entries_in_order()]


class TestPayment:
    def test_immutable(self):
        p = Payment(date(2025, 1, 10), 10000.0)
        with pytest.raises(FrozenInstanceError):
            p.amount = 1.0

    def test_str(self):
        assert str(Payment(date(2025, 1, 10), 10000)) == "2025-01-10: 10000.00"


class TestInsertOrdering:
    def test_sorted_after_every_insert(self):
        ledger = PaymentLedger()
        for d in [date(2025, 3, 1), date(2025, 1, 1), date(2025, 2, 1), date(2024, 12, 31), date(2025, 3, 2)]:
            ledger.insert(Payment(d, 1.0))
            dates = _dates(ledger)
            assert dates == sorted(dates)

    def test_equal_dates_keep_insertion_order(self):
        ledger = PaymentLedger()
        d = date(2025, 1, 15)
        ledger.insert(Payment(date(2025, 2, 1), 9.0))
        ledger.insert(Payment(d, 1.0))
        ledger.insert(Payment(d, 2.0))
        ledger.insert(Payment(date(2025, 1, 1), 8.0))
        ledger.insert(Payment(d, 3.0))
        amounts = [p.amount for p in ledger.entries_in_order()]
        assert amounts == [8.0, 1.0, 2.0, 3.0, 9.0]

    def test_insert_before_head(self):
        ledger = PaymentLedger([Payment(date(2025, 5, 1), 1.0)])
        ledger.insert(Payment(date(2025, 1, 1), 2.0))
        assert _dates(ledger)[0] == date(2025, 1, 1)


class TestRemoveAndFind:
    def test_remove_empty(self):
        assert PaymentLedger().remove_by_date(date(2025, 1, 1)) is False

    def test_remove_missing(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 1), 1.0)])
        assert ledger.remove_by_date(date(2025, 1, 2)) is False
        assert ledger.count() == 1

    def test_remove_first_of_duplicates(self):
        d = date(2025, 1, 15)
        ledger = PaymentLedger([
            Payment(date(2025, 1, 1), 5.0),
            Payment(d, 1.0),
            Payment(d, 2.0),
            Payment(d, 3.0),
        ])
        assert ledger.remove_by_date(d) is True
        assert [p.amount for p in ledger.entries_in_order()] == [5.0, 2.0, 3.0]

    def test_find_first_match(self):
        d = date(2025, 1, 15)
        ledger = PaymentLedger([Payment(d, 1.0), Payment(d, 2.0)])
        assert ledger.find_by_date(d).amount == 1.0
        assert ledger.find_by_date(date(2020, 1, 1)) is None


class TestTotals:
    def test_empty_total_is_zero(self):
        ledger = PaymentLedger()
        assert ledger.total() == 0.0
        assert ledger.count() == 0
        assert ledger.is_empty()

    def test_total_and_count(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 10), 10000), Payment(date(2025, 2, 10), 15000)])
        assert ledger.total() == 25000
        assert ledger.count() == 2
        assert len(ledger) == 2

    def test_negative_amounts(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 1), 100.0), Payment(date(2025, 1, 2), -40.0)])
        assert ledger.total() == 60.0

    def test_insert_then_remove_restores_total(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 1), 0.1), Payment(date(2025, 1, 3), 0.2)])
        before = ledger.total()
        ledger.insert(Payment(date(2025, 1, 2), 0.7))
        ledger.remove_by_date(date(2025, 1, 2))
        assert ledger.total() == before


class TestIteration:
    def test_restartable(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 1), 1.0), Payment(date(2025, 1, 2), 2.0)])
        first = list(ledger.entries_in_order())
        second = list(ledger.entries_in_order())
        assert first == second
        assert len(first) == 2

    def test_mutation_during_iteration_does_not_break_traversal(self):
        ledger = PaymentLedger([Payment(date(2025, 1, 1), 1.0), Payment(date(2025, 1, 2), 2.0)])
        seen = []
        for p in ledger.entries_in_order():
            seen.append(p)
            ledger.remove_by_date(p.date)
        assert len(seen) == 2
        assert ledger.is_empty()


class TestBorrowerRecord:
    def test_balance_is_derived(self):
        b = BorrowerRecord("Ivanov")
        assert b.balance == 0.0
        b.add_payment(Payment(date(2025, 1, 10), 10000))
        b.add_payment(Payment(date(2025, 2, 10), 15000))
        assert b.balance == 25000
        assert b.remove_payment(date(2025, 1, 10)) is True
        assert b.balance == 15000

    @pytest.mark.parametrize("name", ["", "Van Dyke", "Ivanov\t", "a\nb"])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError):
            BorrowerRecord(name)

    def test_case_sensitive_identity(self):
        assert BorrowerRecord("ivanov").last_name != BorrowerRecord("Ivanov").last_name

    def test_overflowing_payment_rejected(self):
        b = BorrowerRecord("Ivanov")
        b.add_payment(Payment(date(2025, 1, 10), 1e308))
        with pytest.raises(ValueError):
            b.add_payment(Payment(date(2025, 1, 11), 1e308))
        assert b.balance == 1e308
        assert b.ledger.count() == 1
