import sys
import pytest
from datetime import date
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.organization import CreditOrganization  # noqa: E402


@pytest.fixture
def sample_org():
    """示例场景：Ivanov 两笔、Petrov 一笔"""
    org = CreditOrganization(10)
    org.add_borrower("Ivanov")
    org.add_payment("Ivanov", date(2025, 1, 10), 10000)
    org.add_payment("Ivanov", date(2025, 2, 10), 15000)
    org.add_borrower("Petrov")
    org.add_payment("Petrov", date(2025, 1, 15), 20000)
    return org


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "credits.txt"
