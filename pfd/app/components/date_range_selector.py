import streamlit as st
import streamlit_antd_components as sac

from datetime import date

from pfd.app.utils.data import default_date_range


DATE_PRESETS = ["Current Month", "Current Year", "Custom Date"]


def select_date_range(key_prefix: str = 'dashboard', today: date | None = None) -> tuple[date, date]:
    """
    This function creates a UI for selecting the date range of the displayed transactions. The current month is
    selected by default.

    Parameters
    ----------
    key_prefix : str
        A prefix to add to the keys of the widgets.
    today : date | None
        The current date, defaults to date.today()

    Returns
    -------
    tuple[date, date]
        The start and end dates of the range, both included
    """
    today = today or date.today()
    month_start, _ = default_date_range(today)
    selection = sac.buttons(
        items=DATE_PRESETS,
        use_container_width=True,
        variant='outline',
        color=None,
        index=0,
        direction='horizontal',
        key=f'{key_prefix}_date_range_buttons'
    )
    if selection == "Current Year":
        return today.replace(month=1, day=1), today
    if selection == "Custom Date":
        dates = st.date_input(
            "Date range", (month_start, today), format="YYYY-MM-DD", key=f'{key_prefix}_date_range_input'
        )
        return resolve_custom_range(dates, month_start, today)
    return month_start, today


def resolve_custom_range(dates: tuple, month_start: date, today: date) -> tuple[date, date]:
    """
    Turn the value of a date range input into a (start, end) pair. While the user picks the range the input holds a
    single date, a cleared input holds no date at all and falls back to the current month.
    """
    if len(dates) == 0:
        return month_start, today
    if len(dates) == 1:
        return dates[0], dates[0]
    start_date, end_date = dates
    return start_date, end_date
