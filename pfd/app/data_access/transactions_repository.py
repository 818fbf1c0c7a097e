import pandas as pd

from datetime import date

from pfd.backend import SupabaseClient
from pfd.app.naming_conventions import Tables, TransactionsTableFields


class TransactionsRepository:
    table = Tables.TRANSACTIONS.value
    id_col = TransactionsTableFields.ID.value
    title_col = TransactionsTableFields.TITLE.value
    amount_col = TransactionsTableFields.AMOUNT.value
    category_col = TransactionsTableFields.CATEGORY.value
    date_col = TransactionsTableFields.DATE.value
    type_col = TransactionsTableFields.TYPE.value
    user_id_col = TransactionsTableFields.USER_ID.value

    def __init__(self, client: SupabaseClient):
        """
        Initializes the TransactionsRepository with a backend client.

        Parameters
        ----------
        client : SupabaseClient
            The client to use for the table calls.
        """
        self.client = client

    def get_table_columns(self) -> list[str]:
        """
        Get the columns of the transactions table.

        Returns
        -------
        list[str]
            A list of column names in the transactions table.
        """
        return [
            self.id_col,
            self.date_col,
            self.title_col,
            self.category_col,
            self.amount_col,
            self.type_col,
        ]

    def get_table(self, start_date: date, end_date: date) -> pd.DataFrame:
        """
        Get the transactions dated within the given range (both ends included), latest first.

        Parameters
        ----------
        start_date : date
            The first date of the range
        end_date : date
            The last date of the range

        Returns
        -------
        pd.DataFrame
            The transactions table as a DataFrame.
        """
        rows = self.client.select(
            self.table,
            filters=[(self.date_col, 'gte', start_date.isoformat()), (self.date_col, 'lte', end_date.isoformat())],
            order=self.date_col,
            ascending=False
        )
        if not rows:
            return pd.DataFrame(columns=self.get_table_columns())
        df = pd.DataFrame(rows)
        df[self.amount_col] = pd.to_numeric(df[self.amount_col]).astype(float)
        return df

    def add_transaction(self, title: str, amount: float, category: str, date_: date, type_: str,
                        user_id: str) -> dict:
        """
        Add a new transaction to the table.

        Returns
        -------
        dict
            The stored row
        """
        rows = self.client.insert(self.table, [{
            self.title_col: title,
            self.amount_col: amount,
            self.category_col: category,
            self.date_col: date_.isoformat(),
            self.type_col: type_,
            self.user_id_col: user_id,
        }])
        return rows[0] if rows else {}

    def delete_transaction(self, id_: str) -> None:
        """Delete the transaction with the given id"""
        self.client.delete(self.table, filters=[(self.id_col, 'eq', id_)])
