"""存储：保存 / 加载 / 导出"""
from pathlib import Path

import streamlit as st

from config.settings import STORE_FILE, EXCEL_EXPORT_FILE
from core.exceptions import StoreError
from core.organization import CreditOrganization
from components.session import get_organization, replace_organization
from data_manager.file_handler import save_store, export_excel

st.set_page_config(page_title="Хранилище", page_icon="💾", layout="wide")
st.title("💾 Хранилище")

org = get_organization()

path_text = st.text_input("Файл", value=str(STORE_FILE))
capacity = st.number_input("Вместимость при загрузке", min_value=1, value=org.capacity, step=1)

c1, c2, c3 = st.columns(3)

with c1:
    if st.button("💾 Сохранить", type="primary"):
        try:
            save_store(org, Path(path_text))
            st.success("✅ Сохранено!")
        except (OSError, ValueError) as e:
            st.error(f"Ошибка сохранения: {e}")

with c2:
    if st.button("📂 Загрузить"):
        try:
            loaded = CreditOrganization.from_file(Path(path_text), int(capacity))
        except (StoreError, OSError) as e:
            st.error(f"Ошибка загрузки: {e}")
        else:
            replace_organization(loaded)
            st.success(f"✅ Загружено! Заемщиков: {loaded.registry.size}")

with c3:
    if st.button("📊 Экспорт в Excel"):
        try:
            out = export_excel(org, EXCEL_EXPORT_FILE)
            st.success(f"Экспортировано в {out}")
        except OSError as e:
            st.error(f"Ошибка экспорта: {e}")

with st.expander("Содержимое файла"):
    st.code(org.registry.serialize(), language="text")
