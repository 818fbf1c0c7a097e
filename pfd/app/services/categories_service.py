import logging
import pandas as pd

from pfd.backend import SupabaseClient
from pfd.app.data_access.categories_repository import CategoriesRepository
from pfd.app.naming_conventions import DEFAULT_CATEGORIES


logger = logging.getLogger(__name__)


class CategoriesService:
    def __init__(self, client: SupabaseClient, user_id: str):
        self.categories_repository = CategoriesRepository(client)
        self.user_id = user_id
        self.name_col = self.categories_repository.name_col
        self.type_col = self.categories_repository.type_col
        self.id_col = self.categories_repository.id_col

    def get_categories(self) -> pd.DataFrame:
        """
        Get the categories of the user ordered by name. A user without any category gets the default categories.

        Returns
        -------
        pd.DataFrame
            The categories table
        """
        categories = self.categories_repository.get_table()
        if categories.empty:
            logger.info("no categories for user %s, adding the default categories", self.user_id)
            self.categories_repository.add_categories(DEFAULT_CATEGORIES, self.user_id)
            categories = self.categories_repository.get_table()
        return categories

    def categories_for_type(self, categories: pd.DataFrame, type_: str) -> pd.DataFrame:
        if categories.empty:
            return categories
        return categories.loc[categories[self.type_col] == type_, :]

    def category_names(self, categories: pd.DataFrame, type_: str) -> list[str]:
        return self.categories_for_type(categories, type_)[self.name_col].tolist()

    def default_category(self, categories: pd.DataFrame, type_: str) -> str | None:
        """the first category of the given type, None if there is none"""
        names = self.category_names(categories, type_)
        return names[0] if names else None

    def add_category(self, name: str, type_: str, categories: pd.DataFrame | None = None) -> bool:
        """
        Add a new category. Blank names and names already used by a category of the same type (ignoring case) are
        rejected. The current categories are fetched when not given.

        Returns
        -------
        bool
            True if the category was added
        """
        name = (name or '').strip()
        if not name:
            return False
        if categories is None:
            categories = self.categories_repository.get_table()
        existing = [n.lower() for n in self.category_names(categories, type_)]
        if name.lower() in existing:
            return False
        self.categories_repository.add_categories([(name, type_)], self.user_id)
        logger.info("added %s category '%s'", type_, name)
        return True

    def rename_category(self, id_: str, old_name: str, new_name: str) -> bool:
        """
        Rename a category. Transactions already saved under the old name keep it.

        Returns
        -------
        bool
            True if the category was renamed
        """
        new_name = (new_name or '').strip()
        if not new_name or new_name == old_name:
            return False
        self.categories_repository.update_name(id_, new_name)
        logger.info("renamed category '%s' to '%s'", old_name, new_name)
        return True

    def delete_category(self, id_: str) -> None:
        """Delete a category. Transactions saved under it keep the category name but it can no longer be selected."""
        self.categories_repository.delete_category(id_)
        logger.info("deleted category %s", id_)
