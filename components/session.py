"""界面会话状态：每个会话持有一个信贷机构实例"""
import streamlit as st

from config.settings import STORE_FILE, DEFAULT_CAPACITY
from core.organization import CreditOrganization
from data_manager.file_handler import load_or_create


def get_organization() -> CreditOrganization:
    if "organization" not in st.session_state:
        st.session_state.organization = load_or_create(STORE_FILE, DEFAULT_CAPACITY)
    return st.session_state.organization


def replace_organization(org: CreditOrganization):
    st.session_state.organization = org
