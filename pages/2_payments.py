"""还款明细"""
import streamlit as st

from components.charts import create_payment_bars, create_cumulative_line
from components.forms import render_payment_form
from components.session import get_organization
from components.tables import render_payments_table
from utils.formatters import fmt_amount

st.set_page_config(page_title="Платежи", page_icon="💳", layout="wide")
st.title("💳 Платежи")

org = get_organization()

names = org.borrower_names()
if not names:
    st.info("Заемщиков пока нет, сначала добавьте заемщика.")
    st.stop()

selected = st.selectbox("Заемщик", names)
borrower = org.find_borrower(selected)

st.metric("Сумма кредита", fmt_amount(borrower.balance))

col_list, col_actions = st.columns([3, 2])

with col_list:
    payments = org.payments_frame(selected)
    render_payments_table(payments)
    if not payments.empty:
        st.plotly_chart(create_payment_bars(payments), width='stretch')

with col_actions:
    result = render_payment_form(key_prefix=selected)
    if result is not None:
        when, amount = result
        try:
            org.add_payment(selected, when, amount)
        except ValueError as e:
            st.error(f"Платёж отклонён: {e}")
        else:
            st.rerun()

    entries = org.payments_of(selected)
    if entries:
        st.subheader("Удалить платёж")
        labels = [str(p) for p in entries]
        idx = st.selectbox("Платёж", range(len(entries)), format_func=lambda i: labels[i])
        if st.button("Удалить платёж", type="secondary"):
            # 按日期删除：同一日期有多笔时删除最早录入的一笔
            org.remove_payment(selected, entries[idx].date)
            st.rerun()

all_payments = org.payments_frame()
if not all_payments.empty:
    st.plotly_chart(create_cumulative_line(all_payments), width='stretch')
