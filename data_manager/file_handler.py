import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd

from config.constants import SHEET_BORROWERS, SHEET_PAYMENTS
from config.settings import STORE_FILE, EXCEL_EXPORT_FILE, DEFAULT_CAPACITY, BACKUP_KEEP, STORE_ENCODING
from core.organization import CreditOrganization

logger = logging.getLogger(__name__)


def _ensure_parent_dir(filepath: Path):
    filepath.parent.mkdir(parents=True, exist_ok=True)


def backup_store(filepath: Path = STORE_FILE, keep: int = BACKUP_KEEP) -> Optional[Path]:
    """覆盖写入前自动备份，返回备份文件路径；keep < 1 时不备份，返回 None"""
    filepath = Path(filepath)
    if keep < 1 or not filepath.exists():
        return None
    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    backup_path = filepath.with_name(f"{filepath.name}.bak_{ts}")
    shutil.copy2(filepath, backup_path)
    logger.debug("backed up %s to %s", filepath, backup_path)
    # 只保留最近 keep 个备份
    backups = sorted(filepath.parent.glob(f"{filepath.name}.bak_*"))
    for old in backups[:-keep]:
        old.unlink()
    return backup_path


def load_or_create(filepath: Path = STORE_FILE, capacity: int = DEFAULT_CAPACITY) -> CreditOrganization:
    """文件存在则加载，否则返回空的机构"""
    filepath = Path(filepath)
    if filepath.exists():
        return CreditOrganization.from_file(filepath, capacity)
    return CreditOrganization(capacity)


def save_store(org: CreditOrganization, filepath: Path = STORE_FILE, backup: bool = True):
    """整体覆盖写入存储文件"""
    filepath = Path(filepath)
    _ensure_parent_dir(filepath)
    # 先序列化，失败时不留下备份
    text = org.registry.serialize()
    if backup:
        backup_store(filepath)
    with open(filepath, "w", encoding=STORE_ENCODING, newline="\n") as f:
        f.write(text)


def export_excel(org: CreditOrganization, filepath: Path = EXCEL_EXPORT_FILE) -> Path:
    """导出借款人与还款明细到 Excel（两个 Sheet）"""
    filepath = Path(filepath)
    _ensure_parent_dir(filepath)
    payments = org.payments_frame()
    payments["date"] = payments["date"].astype(str)
    with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
        org.borrowers_frame().to_excel(writer, sheet_name=SHEET_BORROWERS, index=False)
        payments.to_excel(writer, sheet_name=SHEET_PAYMENTS, index=False)
    return filepath
