import pytest
import pandas as pd

from datetime import date
from typing import Callable
from unittest.mock import MagicMock

from pfd.backend import SupabaseClient


class ClientFixtures:
    @pytest.fixture(scope='function')
    def client(self) -> MagicMock:
        """return a mocked backend client, table calls return no rows by default"""
        client = MagicMock(spec=SupabaseClient)
        client.select.return_value = []
        client.insert.return_value = []
        client.update.return_value = []
        return client

    @pytest.fixture(scope='function')
    def response_maker(self) -> Callable:
        """return a function that creates fake http responses"""
        def make_response(status_code: int = 200, body=None) -> MagicMock:
            response = MagicMock()
            response.status_code = status_code
            response.json.return_value = body
            response.content = b'' if body is None else b'content'
            response.text = '' if body is None else str(body)
            return response
        return make_response


class DataFixtures:
    @pytest.fixture(scope='function')
    def transactions_data(self) -> pd.DataFrame:
        """a small set of transactions spread over two months, latest first"""
        return pd.DataFrame({
            'id': ['t5', 't4', 't3', 't2', 't1'],
            'date': ['2024-02-10', '2024-02-03', '2024-01-25', '2024-01-15', '2024-01-01'],
            'title': ['groceries', 'bonus', 'bus', 'lunch', 'salary'],
            'category': ['Food', 'Bonus', 'Transport', 'Food', 'Salary'],
            'amount': [150.0, 1000.0, 30.0, 50.0, 5000.0],
            'type': ['expense', 'income', 'expense', 'expense', 'income'],
        })

    @pytest.fixture(scope='function')
    def categories_data(self) -> pd.DataFrame:
        return pd.DataFrame({
            'id': ['c1', 'c2', 'c3', 'c4', 'c5'],
            'name': ['Bonus', 'Food', 'Household', 'Salary', 'Transport'],
            'type': ['income', 'expense', 'expense', 'income', 'expense'],
        })

    @pytest.fixture(scope='function')
    def fake_transactions_rows_maker(self, faker) -> Callable:
        """
        return a function that creates fake transactions rows as returned by the backend
        """
        def example_rows(length: int = 10) -> list[dict]:
            return [{'id': faker.uuid4(),
                     'title': faker.word(),
                     'amount': faker.pyfloat(min_value=0, max_value=10000, right_digits=2),
                     'category': faker.word(),
                     'date': faker.date_between(date(2024, 1, 1), date(2024, 12, 31)).isoformat(),
                     'type': faker.random_element(['income', 'expense']),
                     'user_id': 'user-1'} for _ in range(length)]
        return example_rows
