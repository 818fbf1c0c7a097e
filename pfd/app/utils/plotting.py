import pandas as pd
import plotly.graph_objects as go

from pfd.app.naming_conventions import CHART_COLORS, INCOME_COLOR, EXPENSE_COLOR, NAME, VALUE, INCOME, EXPENSE
from pfd.app.utils.data import group_by_category, group_by_month


def pie_plot_by_categories(df: pd.DataFrame, type_: str) -> go.Figure | None:
    """
    Plot the share of each category in the income or the expenses

    Parameters
    ----------
    df : pd.DataFrame
        The transactions data
    type_ : str
        'income' or 'expense', only transactions of this type are plotted

    Returns
    -------
    go.Figure | None
        The pie chart, None if there are no transactions of the given type
    """
    data = group_by_category(df, type_)
    if data.empty:
        return None
    colors = [CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(data))]
    fig = go.Figure(
        go.Pie(
            labels=data[NAME],
            values=data[VALUE],
            textinfo='label+percent',
            marker=dict(colors=colors),
            sort=False,
            name=type_.title()
        )
    )
    fig.update_layout(
        title_text=f'{type_.title()} by Category',
        legend=dict(orientation='h'),
    )
    return fig


def bar_plot_income_expense_by_month(df: pd.DataFrame) -> go.Figure:
    """
    Plot the income next to the expenses of every month

    Parameters
    ----------
    df : pd.DataFrame
        The transactions data

    Returns
    -------
    go.Figure
        A grouped bar plot with one pair of bars per month
    """
    data = group_by_month(df)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=data[NAME], y=data[INCOME], name='Income', marker_color=INCOME_COLOR))
    fig.add_trace(go.Bar(x=data[NAME], y=data[EXPENSE], name='Expense', marker_color=EXPENSE_COLOR))
    fig.update_layout(
        barmode='group',
        title='Income vs. Expense',
        xaxis_title='Month',
        yaxis_title='Amount',
        xaxis_type='category',
    )
    return fig
