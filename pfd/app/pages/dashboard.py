import logging
import streamlit as st
import streamlit_antd_components as sac

from pfd.app.components.categories_editor import CategoriesEditor
from pfd.app.components.dashboard_overview import render_overall, render_by_category
from pfd.app.components.date_range_selector import select_date_range
from pfd.app.components.transaction_form import TransactionForm
from pfd.app.components.transactions_table import TransactionsTable
from pfd.app.naming_conventions import DashboardTabs
from pfd.app.services.auth_service import AuthService
from pfd.app.services.categories_service import CategoriesService
from pfd.app.services.exceptions import ValidationError
from pfd.app.services.transactions_service import TransactionsService
from pfd.app.utils.connection import get_backend_client
from pfd.backend import AuthError, BackendError


logger = logging.getLogger(__name__)

client = get_backend_client()
auth_service = AuthService(client)
session = auth_service.current_session()
if session is None:
    # main.py routes to the sign in page on the next run
    st.stop()

transactions_service = TransactionsService(client, session.user_id)
categories_service = CategoriesService(client, session.user_id)

############################################################
# header
############################################################
title_col, user_col, logout_col = st.columns([0.7, 0.2, 0.1])
title_col.title("Finance Dashboard")
if logout_col.button("Log Out", key='logout_button'):
    try:
        auth_service.sign_out()
    except BackendError as e:
        logger.warning("backend sign out failed, the local session was dropped anyway: %s", e)
    st.rerun()

start_date, end_date = select_date_range()

############################################################
# data
############################################################
try:
    user = auth_service.current_user() or {}
    transactions = transactions_service.get_transactions(start_date, end_date)
    categories = categories_service.get_categories()
except ValidationError as e:
    st.error(e.message)
    st.stop()
except AuthError as e:
    logger.info("session rejected by the backend, signing out: %s", e)
    auth_service.clear_session()
    st.rerun()
except BackendError as e:
    logger.exception("failed to load the dashboard data")
    st.error(f"Failed to load your data: {e.message}")
    st.stop()

user_col.caption(user.get('email') or session.email or '')

categories_editor = CategoriesEditor(categories_service, categories)

############################################################
# content
############################################################
tab_labels = [t.display_name for t in DashboardTabs]
tab_col, manage_col = st.columns([0.8, 0.2])
with tab_col:
    active_tab = sac.buttons(
        items=tab_labels, index=0, use_container_width=True, direction='horizontal', key='dashboard_tab'
    ).lower()
if active_tab != DashboardTabs.OVERALL.value:
    with manage_col:
        categories_editor.render_button(active_tab, key='manage_categories_tab_button')

content_col, form_col = st.columns([0.65, 0.35])

with content_col:
    if active_tab == DashboardTabs.OVERALL.value:
        render_overall(transactions)
    else:
        render_by_category(transactions, active_tab)
    TransactionsTable(transactions_service).render(transactions, active_tab)

with form_col:
    with st.container(border=True):
        form_type = TransactionForm(transactions_service, categories_service, categories).render()
        categories_editor.render_button(form_type, key='manage_categories_form_button', label='+ Manage Categories')
