import pytest

from unittest.mock import patch, call

from tests.conftest import ClientFixtures, DataFixtures
from pfd.app.components.categories_editor import CategoriesEditor
from pfd.app.components.transactions_table import TransactionsTable
from pfd.app.services.categories_service import CategoriesService
from pfd.app.services.transactions_service import TransactionsService
from pfd.backend import BackendError


@pytest.fixture
def st_mock():
    with patch('pfd.app.components.categories_editor.st') as mock:
        yield mock


@pytest.fixture
def editor(client, categories_data):
    return CategoriesEditor(CategoriesService(client, 'user-1'), categories_data)


class TestCategoriesEditor(ClientFixtures, DataFixtures):
    @staticmethod
    def test_add_category(editor, client, st_mock):
        assert editor._add_category('Health', 'expense') is True
        client.insert.assert_called_once()
        st_mock.error.assert_not_called()

    @staticmethod
    def test_backend_error_is_not_reported_as_duplicate(editor, client, st_mock):
        client.insert.side_effect = BackendError('db down', 500)

        assert editor._add_category('Health', 'expense') is False
        assert st_mock.error.call_args_list == [call('Failed to update the categories: db down')]

    @staticmethod
    def test_duplicate_category(editor, client, st_mock):
        assert editor._add_category('food', 'expense') is False
        client.insert.assert_not_called()
        assert st_mock.error.call_args_list == [call('Category already exists.')]

    @staticmethod
    def test_blank_category(editor, client, st_mock):
        assert editor._add_category('  ', 'expense') is False
        client.insert.assert_not_called()
        assert st_mock.error.call_args_list == [call('Please enter a category name.')]


class TestTransactionsTableDelete(ClientFixtures):
    @staticmethod
    def test_delete_transaction(client):
        table = TransactionsTable(TransactionsService(client, 'user-1'))
        with patch('pfd.app.components.transactions_table.st') as st_mock:
            assert table._delete_transaction('t1') is True
        client.delete.assert_called_once_with('transactions', filters=[('id', 'eq', 't1')])
        st_mock.error.assert_not_called()

    @staticmethod
    def test_delete_transaction_failure(client):
        client.delete.side_effect = BackendError('db down', 500)
        table = TransactionsTable(TransactionsService(client, 'user-1'))
        with patch('pfd.app.components.transactions_table.st') as st_mock:
            assert table._delete_transaction('t1') is False
        st_mock.error.assert_called_once_with('Failed to delete the transaction: db down')
