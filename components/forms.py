"""表单组件"""
from datetime import date
from typing import Optional, Tuple

import streamlit as st

from core.organization import CreditOrganization
from data_manager.data_validator import validate_borrower_name, validate_payment_input


def render_borrower_form(org: CreditOrganization, key_prefix: str = "new") -> Optional[str]:
    """渲染新增借款人表单，校验通过时返回姓名"""
    with st.form(f"{key_prefix}_borrower_form", clear_on_submit=True):
        name = st.text_input("Заемщик (фамилия)", key=f"{key_prefix}_last_name")
        submitted = st.form_submit_button("➕ Добавить заемщика", type="primary")

    if not submitted:
        return None

    ok, msg = validate_borrower_name(name, org)
    if not ok:
        st.error(msg)
        return None
    return name.strip()


def render_payment_form(key_prefix: str = "new") -> Optional[Tuple[date, float]]:
    """渲染新增还款表单，校验通过时返回 (日期, 金额)

    日期与金额都以文本输入，与文件格式保持一致（YYYY-MM-DD / 小数点）。
    """
    with st.form(f"{key_prefix}_payment_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        date_text = c1.text_input("Дата (ГГГГ-ММ-ДД)", value=date.today().isoformat(), key=f"{key_prefix}_date")
        amount_text = c2.text_input("Сумма", key=f"{key_prefix}_amount")
        submitted = st.form_submit_button("➕ Добавить платёж", type="primary")

    if not submitted:
        return None

    ok, msg, when, amount = validate_payment_input(date_text, amount_text)
    if not ok:
        st.error(msg)
        return None
    return when, amount
