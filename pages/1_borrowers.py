"""借款人管理"""
import streamlit as st

from components.charts import create_balance_bar
from components.forms import render_borrower_form
from components.metrics import render_overview_metrics
from components.session import get_organization
from components.tables import render_borrowers_table

st.set_page_config(page_title="Заемщики", page_icon="👥", layout="wide")
st.title("👥 Заемщики")

org = get_organization()

render_overview_metrics(org)

col_list, col_actions = st.columns([3, 2])

with col_list:
    borrowers = org.borrowers_frame()
    render_borrowers_table(borrowers)
    if not borrowers.empty:
        st.plotly_chart(create_balance_bar(borrowers), width='stretch')

with col_actions:
    name = render_borrower_form(org)
    if name is not None:
        org.add_borrower(name)
        st.rerun()

    names = org.borrower_names()
    if names:
        st.subheader("Удалить заемщика")
        selected = st.selectbox("Заемщик", names, key="remove_borrower_select")
        if st.button("Удалить заемщика", type="secondary"):
            org.remove_borrower(selected)
            st.rerun()
