"""格式化表格组件"""
import pandas as pd
import streamlit as st


def render_borrowers_table(borrowers: pd.DataFrame):
    """渲染借款人列表"""
    if borrowers.empty:
        st.info("Заемщиков пока нет")
        return

    col_map = {
        "last_name": "Фамилия",
        "balance": "Сумма кредита",
        "payment_count": "Платежей",
    }
    display_df = borrowers[list(col_map)].rename(columns=col_map)
    display_df["Сумма кредита"] = display_df["Сумма кредита"].apply(lambda x: f"{x:,.2f}")
    st.dataframe(display_df, width='stretch', hide_index=True)


def render_payments_table(payments: pd.DataFrame):
    """渲染单个借款人的还款明细"""
    if payments.empty:
        st.info("Платежей нет")
        return

    display_df = payments[["date", "amount"]].rename(columns={"date": "Дата", "amount": "Сумма"})
    display_df["Сумма"] = display_df["Сумма"].apply(lambda x: f"{x:,.2f}")

    if len(display_df) > 24:
        st.dataframe(display_df, width='stretch', hide_index=True, height=600)
    else:
        st.dataframe(display_df, width='stretch', hide_index=True)
