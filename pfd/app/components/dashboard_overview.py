import pandas as pd
import streamlit as st

from pfd.app.naming_conventions import INCOME, EXPENSE, BALANCE, NO_DATA_MESSAGE, TransactionTypes
from pfd.app.utils.data import summarize, format_amount
from pfd.app.utils.plotting import bar_plot_income_expense_by_month, pie_plot_by_categories


def render_overall(df: pd.DataFrame) -> None:
    """display the income, expense and balance totals followed by the monthly income vs. expense bar chart"""
    summary = summarize(df)
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric("Total Income", format_amount(summary[INCOME], TransactionTypes.INCOME.value))
    expense_col.metric("Total Expense", format_amount(summary[EXPENSE], TransactionTypes.EXPENSE.value))
    balance_col.metric("Balance", format_amount(summary[BALANCE]))

    with st.container(border=True):
        st.plotly_chart(bar_plot_income_expense_by_month(df), use_container_width=True)


def render_by_category(df: pd.DataFrame, type_: str) -> None:
    """display the share of every category of the given type"""
    with st.container(border=True):
        fig = pie_plot_by_categories(df, type_)
        if fig is None:
            st.info(NO_DATA_MESSAGE)
        else:
            st.plotly_chart(fig, use_container_width=True)
