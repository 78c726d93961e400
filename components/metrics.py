"""指标卡片组件"""
import streamlit as st

from core.organization import CreditOrganization
from utils.formatters import fmt_amount


def render_overview_metrics(org: CreditOrganization):
    """渲染概览指标卡片"""
    registry = org.registry
    payment_count = sum(b.ledger.count() for b in registry)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Общая сумма кредитов", fmt_amount(org.total_credits()))
    with c2:
        st.metric("Заемщиков", f"{registry.size} / {registry.capacity}")
    with c3:
        st.metric("Платежей", f"{payment_count}")
