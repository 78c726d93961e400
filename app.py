"""信贷机构 Dashboard - 主入口"""
import streamlit as st

from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT, STORE_FILE
from components.session import get_organization
from components.metrics import render_overview_metrics

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

org = get_organization()

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

render_overview_metrics(org)

st.markdown("""
### Разделы

| Страница | Назначение |
|------|------|
| 👥 **Заемщики** | Список заемщиков, добавление и удаление |
| 💳 **Платежи** | Платежи выбранного заемщика, добавление и удаление по дате |
| 💾 **Хранилище** | Сохранение и загрузка файла, экспорт в Excel |
""")

with st.sidebar:
    st.markdown("### О программе")
    st.markdown(f"Данные хранятся в `{STORE_FILE}`")
