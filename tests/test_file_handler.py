"""文件层测试：备份、加载、Excel 导出"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datetime import date

import pandas as pd
import pytest

from config.constants import SHEET_BORROWERS, SHEET_PAYMENTS
from core.exceptions import MissingSectionError
from core.ledger import Payment
from core.organization import CreditOrganization
from data_manager.file_handler import backup_store, load_or_create, save_store, export_excel


class TestBackup:
    def test_no_file_no_backup(self, store_path):
        assert backup_store(store_path) is None

    def test_backup_copies_content(self, sample_org, store_path):
        sample_org.save(store_path)
        backup = backup_store(store_path)
        assert backup.exists()
        assert backup.read_text(encoding="utf-8") == store_path.read_text(encoding="utf-8")

    def test_keeps_latest(self, sample_org, store_path):
        sample_org.save(store_path)
        for _ in range(4):
            backup_store(store_path, keep=2)
        assert len(list(store_path.parent.glob("credits.txt.bak_*"))) == 2

    def test_keep_zero_makes_no_backup(self, sample_org, store_path):
        sample_org.save(store_path)
        assert backup_store(store_path, keep=0) is None
        assert list(store_path.parent.glob("credits.txt.bak_*")) == []


class TestLoadOrCreate:
    def test_missing_file_gives_empty(self, store_path):
        org = load_or_create(store_path, capacity=4)
        assert org.registry.is_empty()
        assert org.capacity == 4

    def test_existing_file(self, sample_org, store_path):
        sample_org.save(store_path)
        org = load_or_create(store_path, capacity=10)
        assert org.total_credits() == 45000

    def test_corrupt_file_raises(self, store_path):
        store_path.write_text("garbage\n", encoding="utf-8")
        with pytest.raises(MissingSectionError):
            load_or_create(store_path)


class TestSaveStore:
    def test_creates_parent_dir(self, sample_org, tmp_path):
        target = tmp_path / "nested" / "dir" / "credits.txt"
        save_store(sample_org, target)
        assert CreditOrganization.from_file(target).total_credits() == 45000

    def test_backup_on_overwrite(self, sample_org, store_path):
        save_store(sample_org, store_path)
        sample_org.remove_borrower("Petrov")
        save_store(sample_org, store_path)
        backups = list(store_path.parent.glob("credits.txt.bak_*"))
        assert len(backups) == 1
        assert "Petrov" in backups[0].read_text(encoding="utf-8")
        assert "Petrov" not in store_path.read_text(encoding="utf-8")

    def test_without_backup(self, sample_org, store_path):
        save_store(sample_org, store_path, backup=False)
        save_store(sample_org, store_path, backup=False)
        assert list(store_path.parent.glob("credits.txt.bak_*")) == []

    def test_unwritable_amount_leaves_no_backup(self, sample_org, store_path):
        save_store(sample_org, store_path)
        before = store_path.read_text(encoding="utf-8")
        # 绕过 add_payment 的溢出检查，直接写入账本
        sample_org.find_borrower("Petrov").ledger.insert(Payment(date(2025, 3, 1), float("inf")))
        with pytest.raises(ValueError):
            save_store(sample_org, store_path)
        assert store_path.read_text(encoding="utf-8") == before
        assert list(store_path.parent.glob("credits.txt.bak_*")) == []


class TestExportExcel:
    def test_two_sheets(self, sample_org, tmp_path):
        out = export_excel(sample_org, tmp_path / "credits.xlsx")
        xls = pd.ExcelFile(out, engine="openpyxl")
        assert SHEET_BORROWERS in xls.sheet_names
        assert SHEET_PAYMENTS in xls.sheet_names

        borrowers = pd.read_excel(out, sheet_name=SHEET_BORROWERS, engine="openpyxl")
        assert borrowers["last_name"].tolist() == ["Ivanov", "Petrov"]
        assert borrowers["balance"].sum() == 45000

        payments = pd.read_excel(out, sheet_name=SHEET_PAYMENTS, engine="openpyxl")
        assert len(payments) == 3
        assert payments.iloc[0]["date"] == "2025-01-10"

    def test_empty_organization(self, tmp_path):
        out = export_excel(CreditOrganization(2), tmp_path / "empty.xlsx")
        assert pd.read_excel(out, sheet_name=SHEET_PAYMENTS, engine="openpyxl").empty
