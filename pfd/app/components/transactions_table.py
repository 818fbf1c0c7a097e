import logging
import pandas as pd
import streamlit as st

from pfd.app.naming_conventions import DashboardTabs
from pfd.app.services.transactions_service import TransactionsService
from pfd.app.utils.data import filter_by_tab, format_amount
from pfd.backend import BackendError


logger = logging.getLogger(__name__)


class TransactionsTable:
    def __init__(self, service: TransactionsService):
        self.service = service
        repo = service.transactions_repository
        self.id_col = repo.id_col
        self.date_col = repo.date_col
        self.title_col = repo.title_col
        self.category_col = repo.category_col
        self.amount_col = repo.amount_col
        self.type_col = repo.type_col

    def render(self, df: pd.DataFrame, tab: str) -> None:
        """
        Display the transactions of the given dashboard tab as a table, every row has a delete button.

        Parameters
        ----------
        df : pd.DataFrame
            All the fetched transactions
        tab : str
            The active dashboard tab, 'overall' shows all the transactions
        """
        title = 'All Transactions' if tab == DashboardTabs.OVERALL.value else f'{tab.title()} Transactions'
        st.subheader(title, divider="gray")
        data = filter_by_tab(df, tab)
        if data.empty:
            st.info("No transactions found")
            return

        date_col, title_col, amount_col, delete_col = st.columns([2, 5, 2, 1])
        date_col.markdown("**Date**")
        title_col.markdown("**Title**")
        amount_col.markdown("**Amount**")
        for _, row in data.iterrows():
            date_col, title_col, amount_col, delete_col = st.columns([2, 5, 2, 1])
            date_col.write(str(row[self.date_col]))
            title_col.markdown(f"{row[self.title_col]}  \n:gray[{row[self.category_col]}]")
            color = 'green' if row[self.type_col] == 'income' else 'red'
            amount_col.markdown(f":{color}[**{format_amount(row[self.amount_col], row[self.type_col])}**]")
            if delete_col.button('🗑️', key=f'delete_transaction_{row[self.id_col]}', help='Delete transaction'):
                self._delete_transaction_dialog(row[self.id_col], row[self.title_col])

    @st.dialog('Confirm Deletion')
    def _delete_transaction_dialog(self, id_: str, title: str):
        st.write(f"Are you sure you want to delete '{title}'? This action cannot be undone.")
        cancel_col, confirm_col = st.columns(2)
        if cancel_col.button('Cancel', key='cancel_delete_transaction', use_container_width=True):
            st.rerun()
        if confirm_col.button('Delete', key='confirm_delete_transaction', type='primary', use_container_width=True):
            if self._delete_transaction(id_):
                st.rerun()

    def _delete_transaction(self, id_: str) -> bool:
        try:
            self.service.delete_transaction(id_)
        except BackendError as e:
            logger.error("failed to delete transaction %s: %s", id_, e)
            st.error(f"Failed to delete the transaction: {e.message}")
            return False
        return True
