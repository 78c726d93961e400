import os
from pathlib import Path

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

# 数据文件路径
DATA_DIR = PROJECT_ROOT / "data"
STORE_FILE = Path(os.environ.get("CREDIT_STORE_FILE", DATA_DIR / "credits.txt"))
EXCEL_EXPORT_FILE = DATA_DIR / "credits.xlsx"
STORE_ENCODING = "utf-8"

# 备份保留数量
BACKUP_KEEP = 5


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


# 登记簿容量（构造后不可变）
DEFAULT_CAPACITY = _env_int("CREDIT_CAPACITY", 10)

# 日期格式 (ISO-8601)
DATE_FORMAT = "%Y-%m-%d"

# 页面配置
PAGE_TITLE = "Кредитная организация"
PAGE_ICON = "🏦"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "primary": "#1f77b4",
    "secondary": "#ff7f0e",
    "success": "#2ca02c",
    "danger": "#d62728",
    "balance": "#1f77b4",
    "payment": "#2ca02c",
    "refund": "#d62728",
}

# 金额精度
AMOUNT_PRECISION = 2
