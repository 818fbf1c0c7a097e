import logging
import pandas as pd
import streamlit as st

from pfd.app.services.categories_service import CategoriesService
from pfd.backend import BackendError


logger = logging.getLogger(__name__)


class CategoriesEditor:
    def __init__(self, service: CategoriesService, categories: pd.DataFrame):
        self.service = service
        self.categories = categories
        self.pending_delete_key = 'categories_editor_pending_delete'

    def render_button(self, type_: str, key: str, label: str = '⚙️ Manage Categories') -> None:
        """display a button opening the categories dialog of the given transaction type"""
        if st.button(label, key=key):
            st.session_state.pop(self.pending_delete_key, None)
            self._categories_dialog(type_)

    @st.dialog('Manage Categories')
    def _categories_dialog(self, type_: str):
        st.caption(f"{type_.title()} categories")
        new_col, add_col = st.columns([0.75, 0.25])
        new_name = new_col.text_input("New category", placeholder="New category name", key=f'new_{type_}_category',
                                      label_visibility='collapsed')
        if add_col.button('Add', key=f'add_{type_}_category', use_container_width=True):
            if self._add_category(new_name, type_):
                st.rerun()

        categories = self.service.categories_for_type(self.categories, type_)
        if categories.empty:
            st.info("No categories yet.")
        pending_delete = st.session_state.get(self.pending_delete_key)
        for _, row in categories.iterrows():
            id_, name = row[self.service.id_col], row[self.service.name_col]
            name_col, save_col, delete_col = st.columns([0.6, 0.2, 0.2])
            edited = name_col.text_input("Name", value=name, key=f'edit_category_{id_}', label_visibility='collapsed')
            if save_col.button('Save', key=f'save_category_{id_}', disabled=edited.strip() in ('', name)):
                if self._call(self.service.rename_category, id_, name, edited):
                    st.rerun()
            if delete_col.button('Delete', key=f'delete_category_{id_}', type='primary'):
                st.session_state[self.pending_delete_key] = id_
                pending_delete = id_

            if pending_delete == id_:
                st.warning(f"Delete '{name}'? Transactions already saved under this category keep it, but it can no "
                           f"longer be selected.")
                cancel_col, confirm_col = st.columns(2)
                if cancel_col.button('Cancel', key=f'cancel_delete_category_{id_}', use_container_width=True):
                    st.session_state.pop(self.pending_delete_key, None)
                    st.rerun(scope='fragment')
                if confirm_col.button('Confirm', key=f'confirm_delete_category_{id_}', use_container_width=True):
                    st.session_state.pop(self.pending_delete_key, None)
                    try:
                        self.service.delete_category(id_)
                    except BackendError as e:
                        logger.error("failed to delete category %s: %s", id_, e)
                        st.error(f"Failed to delete the category: {e.message}")
                    else:
                        st.rerun()

    def _add_category(self, name: str, type_: str) -> bool:
        """add the category and report why it was not added, returns True if it was added"""
        if not name.strip():
            st.error("Please enter a category name.")
            return False
        added = self._call(self.service.add_category, name, type_, self.categories)
        if added is False:
            st.error("Category already exists.")
        return bool(added)

    def _call(self, func, *args):
        """call the service, a failed backend call is reported and returns None"""
        try:
            return func(*args)
        except BackendError as e:
            logger.error("category update failed: %s", e)
            st.error(f"Failed to update the categories: {e.message}")
            return None
