# 文件分节标记（与旧版桌面程序保存的文件兼容，不可翻译）
SECTION_BORROWERS = "[ЗАЕМЩИКИ]"
SECTION_PAYMENTS = "[ПЛАТЕЖИ]"

FIELD_SEPARATOR = " "

# 每行字段数
BORROWER_FIELDS = 2  # <name> <total>
PAYMENT_FIELDS = 3  # <name> <date> <amount>

# Excel 导出 Sheet 名称
SHEET_BORROWERS = "Заемщики"
SHEET_PAYMENTS = "Платежи"

# 列定义
BORROWERS_COLUMNS = ["last_name", "balance", "payment_count"]

PAYMENTS_COLUMNS = ["last_name", "date", "amount"]
