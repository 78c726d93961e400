from datetime import date
from typing import Optional, Tuple

from utils.date_utils import parse_iso_date
from utils.formatters import parse_plain_decimal


def validate_borrower_name(name: str, organization=None) -> Tuple[bool, str]:
    """校验借款人姓名，返回 (是否合法, 错误信息)"""
    if not name or not name.strip():
        return False, "Пожалуйста, введите фамилию заемщика!"

    name = name.strip()
    if any(ch.isspace() for ch in name):
        return False, "Фамилия не должна содержать пробелов"

    if organization is not None:
        if organization.find_borrower(name) is not None:
            return False, "Заемщик с такой фамилией уже существует, пожалуйста, проверьте список!"
        if organization.registry.is_full():
            return False, f"Достигнута максимальная вместимость ({organization.capacity})"

    return True, ""


def validate_payment_input(
    date_text: str,
    amount_text: str,
) -> Tuple[bool, str, Optional[date], Optional[float]]:
    """校验还款输入，返回 (是否合法, 错误信息, 日期, 金额)"""
    try:
        when = parse_iso_date(date_text or "")
    except ValueError:
        return False, "Неверный формат даты! Используйте ГГГГ-ММ-ДД", None, None

    try:
        amount = parse_plain_decimal((amount_text or "").strip())
    except ValueError:
        return False, "Сумма должна быть числом!", None, None

    return True, "", when, amount
