import logging
import math
import pandas as pd

from datetime import date, datetime

from pfd.backend import SupabaseClient
from pfd.app.data_access.transactions_repository import TransactionsRepository
from pfd.app.naming_conventions import TransactionTypes, FUTURE_DATE_WARNING
from pfd.app.services.exceptions import ValidationError


logger = logging.getLogger(__name__)


class TransactionsService:
    def __init__(self, client: SupabaseClient, user_id: str):
        self.transactions_repository = TransactionsRepository(client)
        self.user_id = user_id

    def get_transactions(self, start_date: date, end_date: date) -> pd.DataFrame:
        """
        Get the transactions dated within the given range, latest first.

        Parameters
        ----------
        start_date : date
            The first date of the range
        end_date : date
            The last date of the range

        Returns
        -------
        pd.DataFrame
            A DataFrame containing the transactions.
        """
        if start_date > end_date:
            raise ValidationError("The start date must not be after the end date")
        return self.transactions_repository.get_table(start_date, end_date)

    def add_transaction(self, title: str, amount: float | str | None, category: str | None, date_: date | str,
                        type_: str, today: date | None = None) -> list[str]:
        """
        Validate and save a new transaction.

        Parameters
        ----------
        title : str
            The title of the transaction
        amount : float | str | None
            The amount of the transaction, must be a non-negative number
        category : str | None
            The name of the category
        date_ : date | str
            The date of the transaction, a date object or an ISO formatted string
        type_ : str
            'income' or 'expense'
        today : date | None
            The current date, defaults to date.today()

        Returns
        -------
        list[str]
            Warnings about the saved transaction. A transaction dated in the future is saved with a warning.

        Raises
        ------
        ValidationError
            If one of the fields is invalid, nothing is saved in that case
        """
        title = (title or '').strip()
        if not title:
            raise ValidationError("Please enter a title")
        amount = self._parse_amount(amount)
        if type_ not in [t.value for t in TransactionTypes]:
            raise ValidationError(f"Transaction type must be 'income' or 'expense', got '{type_}'")
        if not category:
            raise ValidationError("Please add a category first")
        date_ = self._parse_date(date_)

        warnings = []
        if date_ > (today or date.today()):
            warnings.append(FUTURE_DATE_WARNING)

        self.transactions_repository.add_transaction(title, amount, category, date_, type_, self.user_id)
        logger.info("added %s transaction '%s' of %s dated %s", type_, title, amount, date_)
        return warnings

    def delete_transaction(self, id_: str) -> None:
        self.transactions_repository.delete_transaction(id_)
        logger.info("deleted transaction %s", id_)

    @staticmethod
    def _parse_amount(amount: float | str | None) -> float:
        if amount is None or amount == '':
            raise ValidationError("Please enter an amount")
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            raise ValidationError(f"Amount must be a number, got '{amount}'")
        if not math.isfinite(amount):
            raise ValidationError(f"Amount must be a finite number, got '{amount}'")
        if amount < 0:
            raise ValidationError("Amount must not be negative")
        return amount

    @staticmethod
    def _parse_date(date_: date | str) -> date:
        if isinstance(date_, datetime):
            return date_.date()
        if isinstance(date_, date):
            return date_
        try:
            return date.fromisoformat(str(date_))
        except ValueError:
            raise ValidationError(f"Invalid date '{date_}'")
