import pytest
import streamlit as st

from datetime import date, timedelta
from unittest.mock import patch

from tests.conftest import ClientFixtures, DataFixtures
from pfd.app.components.transaction_form import TransactionForm
from pfd.app.naming_conventions import FUTURE_DATE_WARNING
from pfd.app.services.categories_service import CategoriesService
from pfd.app.services.transactions_service import TransactionsService
from pfd.backend import BackendError


CATEGORY_KEY = 'transaction_form_category_expense'


@pytest.fixture
def form(client, categories_data):
    return TransactionForm(TransactionsService(client, 'user-1'), CategoriesService(client, 'user-1'), categories_data)


@pytest.fixture
def session_state():
    state = {
        'transaction_form_title': 'lunch',
        'transaction_form_amount': 12.5,
        'transaction_form_date': date(2024, 1, 3),
        CATEGORY_KEY: 'Food',
    }
    with patch.object(st, 'session_state', state):
        yield state


class TestTransactionFormSubmit(ClientFixtures, DataFixtures):
    @staticmethod
    def test_success_resets_title_and_amount(form, client, session_state):
        form._submit('expense', CATEGORY_KEY)

        client.insert.assert_called_once_with('transactions', [{
            'title': 'lunch', 'amount': 12.5, 'category': 'Food', 'date': '2024-01-03', 'type': 'expense',
            'user_id': 'user-1'
        }])
        assert session_state['transaction_form_title'] == ''
        assert session_state['transaction_form_amount'] is None
        assert session_state[CATEGORY_KEY] == 'Food'
        assert session_state['transaction_form_date'] == date(2024, 1, 3)
        assert session_state['transaction_form_messages'] == [('success', 'Transaction saved')]

    @staticmethod
    def test_future_date_warning(form, session_state):
        session_state['transaction_form_date'] = date.today() + timedelta(days=1)
        form._submit('expense', CATEGORY_KEY)

        assert session_state['transaction_form_messages'] == [('warning', FUTURE_DATE_WARNING),
                                                              ('success', 'Transaction saved')]

    @staticmethod
    def test_invalid_input_keeps_the_form(form, client, session_state):
        session_state['transaction_form_amount'] = None
        form._submit('expense', CATEGORY_KEY)

        client.insert.assert_not_called()
        assert session_state['transaction_form_title'] == 'lunch'
        assert session_state['transaction_form_messages'] == [('error', 'Please enter an amount')]

    @staticmethod
    def test_backend_error_keeps_the_form(form, client, session_state):
        client.insert.side_effect = BackendError('db down', 500)
        form._submit('expense', CATEGORY_KEY)

        assert session_state['transaction_form_title'] == 'lunch'
        assert session_state['transaction_form_messages'] == [('error', 'Failed to save the transaction: db down')]
