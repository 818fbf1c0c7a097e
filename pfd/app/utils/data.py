import pandas as pd

from datetime import date

from pfd.app.naming_conventions import (
    TransactionsTableFields,
    TransactionTypes,
    DashboardTabs,
    NAME,
    VALUE,
    INCOME,
    EXPENSE,
    BALANCE,
)


amount_col = TransactionsTableFields.AMOUNT.value
category_col = TransactionsTableFields.CATEGORY.value
date_col = TransactionsTableFields.DATE.value
type_col = TransactionsTableFields.TYPE.value


def summarize(df: pd.DataFrame) -> dict[str, float]:
    """
    Sum the income and expense amounts of the transactions and compute the balance.

    Parameters
    ----------
    df : pd.DataFrame
        The transactions data

    Returns
    -------
    dict[str, float]
        a dictionary with the keys 'income', 'expense' and 'balance'
    """
    if df.empty:
        return {INCOME: 0.0, EXPENSE: 0.0, BALANCE: 0.0}
    income = float(df.loc[df[type_col] == TransactionTypes.INCOME.value, amount_col].sum())
    expense = float(df.loc[df[type_col] == TransactionTypes.EXPENSE.value, amount_col].sum())
    return {INCOME: income, EXPENSE: expense, BALANCE: income - expense}


def group_by_category(df: pd.DataFrame, type_: str) -> pd.DataFrame:
    """
    Sum the amounts of the transactions of the given type per category. Categories keep the order in which they first
    appear in the data.

    Parameters
    ----------
    df : pd.DataFrame
        The transactions data
    type_ : str
        'income' or 'expense'

    Returns
    -------
    pd.DataFrame
        a DataFrame with the columns 'name' (the category) and 'value' (the total amount)
    """
    if df.empty:
        return pd.DataFrame(columns=[NAME, VALUE])
    filtered = df.loc[df[type_col] == type_, [category_col, amount_col]]
    grouped = filtered.groupby(category_col, sort=False)[amount_col].sum().reset_index()
    return grouped.rename(columns={category_col: NAME, amount_col: VALUE})


def group_by_month(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sum the income and expense amounts of the transactions per month. Every transaction which is not an income counts
    as an expense.

    Parameters
    ----------
    df : pd.DataFrame
        The transactions data, dates are ISO formatted strings

    Returns
    -------
    pd.DataFrame
        a DataFrame with the columns 'name' (YYYY-MM), 'income' and 'expense', sorted by month
    """
    if df.empty:
        return pd.DataFrame(columns=[NAME, INCOME, EXPENSE])
    is_income = df[type_col] == TransactionTypes.INCOME.value
    monthly = pd.DataFrame({
        NAME: df[date_col].astype(str).str[:7],
        INCOME: df[amount_col].where(is_income, 0.0),
        EXPENSE: df[amount_col].where(~is_income, 0.0),
    })
    monthly = monthly.groupby(NAME, sort=True)[[INCOME, EXPENSE]].sum().reset_index()
    return monthly


def filter_by_tab(df: pd.DataFrame, tab: str) -> pd.DataFrame:
    """return the transactions displayed in the given dashboard tab"""
    if tab == DashboardTabs.OVERALL.value or df.empty:
        return df
    return df.loc[df[type_col] == tab, :]


def default_date_range(today: date | None = None) -> tuple[date, date]:
    """the dashboard shows the current month up to today by default"""
    today = today or date.today()
    return today.replace(day=1), today


def format_amount(amount: float, type_: str | None = None) -> str:
    """format an amount with thousands separators, signed by the transaction type when one is given"""
    text = f'{amount:,.2f}'.rstrip('0').rstrip('.')
    if type_ == TransactionTypes.INCOME.value:
        return f'+{text}'
    if type_ == TransactionTypes.EXPENSE.value:
        return f'-{text}'
    return text
