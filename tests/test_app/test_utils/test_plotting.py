import pandas as pd

from tests.conftest import DataFixtures
from pfd.app.naming_conventions import CHART_COLORS, INCOME_COLOR, EXPENSE_COLOR
from pfd.app.utils.plotting import pie_plot_by_categories, bar_plot_income_expense_by_month


class TestPlotting(DataFixtures):
    @staticmethod
    def test_pie_plot(transactions_data):
        fig = pie_plot_by_categories(transactions_data, 'expense')
        pie = fig.data[0]
        assert list(pie.labels) == ['Food', 'Transport']
        assert list(pie.values) == [200.0, 30.0]
        assert list(pie.marker.colors) == CHART_COLORS[:2]

    @staticmethod
    def test_pie_plot_cycles_colors():
        n = len(CHART_COLORS) + 2
        df = pd.DataFrame({
            'category': [f'cat {i}' for i in range(n)],
            'amount': [1.0] * n,
            'type': ['expense'] * n,
            'date': ['2024-01-01'] * n,
        })
        fig = pie_plot_by_categories(df, 'expense')
        colors = list(fig.data[0].marker.colors)
        assert colors[len(CHART_COLORS)] == CHART_COLORS[0]
        assert colors[-1] == CHART_COLORS[1]

    @staticmethod
    def test_pie_plot_without_data(transactions_data):
        expenses_only = transactions_data.loc[transactions_data['type'] == 'expense']
        assert pie_plot_by_categories(expenses_only, 'income') is None

    @staticmethod
    def test_bar_plot(transactions_data):
        fig = bar_plot_income_expense_by_month(transactions_data)
        income, expense = fig.data
        assert list(income.x) == ['2024-01', '2024-02']
        assert list(income.y) == [5000.0, 1000.0]
        assert list(expense.y) == [80.0, 150.0]
        assert income.marker.color == INCOME_COLOR
        assert expense.marker.color == EXPENSE_COLOR
        assert fig.layout.barmode == 'group'

    @staticmethod
    def test_bar_plot_without_data():
        fig = bar_plot_income_expense_by_month(pd.DataFrame())
        assert all(trace.x is None or len(trace.x) == 0 for trace in fig.data)
