import pandas as pd

from pfd.backend import SupabaseClient
from pfd.app.naming_conventions import Tables, CategoriesTableFields


class CategoriesRepository:
    table = Tables.CATEGORIES.value
    id_col = CategoriesTableFields.ID.value
    name_col = CategoriesTableFields.NAME.value
    type_col = CategoriesTableFields.TYPE.value
    user_id_col = CategoriesTableFields.USER_ID.value

    def __init__(self, client: SupabaseClient):
        self.client = client

    def get_table(self) -> pd.DataFrame:
        """Get the categories table ordered by name"""
        rows = self.client.select(self.table, order=self.name_col)
        if not rows:
            return pd.DataFrame(columns=[self.id_col, self.name_col, self.type_col])
        return pd.DataFrame(rows)

    def add_categories(self, categories: list[tuple[str, str]], user_id: str) -> None:
        """
        Add categories to the table in a single call.

        Parameters
        ----------
        categories : list[tuple[str, str]]
            (name, type) pairs of the categories to add
        user_id : str
            The id of the user owning the categories
        """
        rows = [{self.name_col: name, self.type_col: type_, self.user_id_col: user_id} for name, type_ in categories]
        self.client.insert(self.table, rows)

    def update_name(self, id_: str, name: str) -> None:
        self.client.update(self.table, {self.name_col: name}, filters=[(self.id_col, 'eq', id_)])

    def delete_category(self, id_: str) -> None:
        self.client.delete(self.table, filters=[(self.id_col, 'eq', id_)])
