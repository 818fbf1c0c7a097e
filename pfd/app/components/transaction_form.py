import logging
import pandas as pd
import streamlit as st
import streamlit_antd_components as sac

from datetime import date

from pfd.app.naming_conventions import TransactionTypes
from pfd.app.services.categories_service import CategoriesService
from pfd.app.services.exceptions import ValidationError
from pfd.app.services.transactions_service import TransactionsService
from pfd.backend import BackendError


logger = logging.getLogger(__name__)


class TransactionForm:
    key_prefix = 'transaction_form'

    def __init__(self, transactions_service: TransactionsService, categories_service: CategoriesService,
                 categories: pd.DataFrame):
        self.transactions_service = transactions_service
        self.categories_service = categories_service
        self.categories = categories
        self.title_key = f'{self.key_prefix}_title'
        self.amount_key = f'{self.key_prefix}_amount'
        self.date_key = f'{self.key_prefix}_date'
        self.messages_key = f'{self.key_prefix}_messages'

    def render(self) -> str:
        """
        Display the form for recording a new transaction.

        Returns
        -------
        str
            The transaction type currently selected in the form
        """
        st.subheader("New Transaction", divider="gray")
        type_ = sac.buttons(
            items=[TransactionTypes.EXPENSE.value.title(), TransactionTypes.INCOME.value.title()],
            use_container_width=True,
            index=0,
            direction='horizontal',
            key=f'{self.key_prefix}_type'
        ).lower()
        category_options = self.categories_service.category_names(self.categories, type_)
        default_category = self.categories_service.default_category(self.categories, type_)
        # the category widget is keyed by type so switching the type selects the first category of the new type
        category_key = f'{self.key_prefix}_category_{type_}'

        with st.form(key=f'{self.key_prefix}_form', border=False):
            st.text_input("Title", placeholder="Title", key=self.title_key)
            st.number_input("Amount", min_value=0.0, value=None, step=1.0, format="%.2f", placeholder="0.00",
                            key=self.amount_key)
            st.selectbox("Category", category_options,
                         index=category_options.index(default_category) if default_category else None,
                         placeholder="Please add a category", key=category_key)
            st.date_input("Date", value=date.today(), format="YYYY-MM-DD", key=self.date_key)
            st.form_submit_button(
                label=f"+ Save {type_.title()}", type='primary', use_container_width=True,
                on_click=self._submit, args=(type_, category_key)
            )

        for level, message in st.session_state.pop(self.messages_key, []):
            getattr(st, level)(message)
        return type_

    def _submit(self, type_: str, category_key: str) -> None:
        messages = []
        try:
            warnings = self.transactions_service.add_transaction(
                title=st.session_state.get(self.title_key),
                amount=st.session_state.get(self.amount_key),
                category=st.session_state.get(category_key),
                date_=st.session_state.get(self.date_key),
                type_=type_
            )
        except ValidationError as e:
            messages.append(('error', e.message))
        except BackendError as e:
            logger.error("failed to save transaction: %s", e)
            messages.append(('error', f"Failed to save the transaction: {e.message}"))
        else:
            messages.extend(('warning', w) for w in warnings)
            messages.append(('success', "Transaction saved"))
            # keep the type, category and date for the next transaction
            st.session_state[self.title_key] = ''
            st.session_state[self.amount_key] = None
        st.session_state[self.messages_key] = messages
