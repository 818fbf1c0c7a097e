from enum import Enum
from typing import Type

NAME = 'name'
VALUE = 'value'
INCOME = 'income'
EXPENSE = 'expense'
BALANCE = 'balance'

NO_DATA_MESSAGE = 'No data in this period'
FUTURE_DATE_WARNING = 'You are recording a date in the future!'

CHART_COLORS = ['#0088FE', '#00C49F', '#FFBB28', '#FF8042', '#AF19FF', '#FF5555', '#A0A0A0']
INCOME_COLOR = '#22c55e'
EXPENSE_COLOR = '#ef4444'


class Tables(Enum):
    TRANSACTIONS = 'transactions'
    CATEGORIES = 'categories'


def create_enum(name: str, fields: list[tuple[str, str]]) -> Type[Enum]:
    return Enum(name, fields)


TransactionsTableFields = create_enum('TransactionsTableFields', [
    ('ID', 'id'),
    ('TITLE', 'title'),
    ('AMOUNT', 'amount'),
    ('CATEGORY', 'category'),
    ('DATE', 'date'),
    ('TYPE', 'type'),
    ('USER_ID', 'user_id'),
])

CategoriesTableFields = create_enum('CategoriesTableFields', [
    ('ID', 'id'),
    ('NAME', 'name'),
    ('TYPE', 'type'),
    ('USER_ID', 'user_id'),
])


class TransactionTypes(Enum):
    INCOME = 'income'
    EXPENSE = 'expense'


class DashboardTabs(Enum):
    OVERALL = 'overall'
    EXPENSE = 'expense'
    INCOME = 'income'

    @property
    def display_name(self) -> str:
        return self.value.title()


DEFAULT_CATEGORIES = [
    ('Food', TransactionTypes.EXPENSE.value),
    ('Transport', TransactionTypes.EXPENSE.value),
    ('Household', TransactionTypes.EXPENSE.value),
    ('Salary', TransactionTypes.INCOME.value),
    ('Bonus', TransactionTypes.INCOME.value),
]
