import streamlit as st

from pfd.app.services.auth_service import AuthService
from pfd.app.utils.config import load_config, configure_logging

configure_logging(load_config())

st.set_page_config(page_title='Finance Dashboard', layout='wide')

if st.session_state.get(AuthService.session_key) is None:
    pages = [st.Page("pfd/app/pages/login.py", title="Sign In")]
else:
    pages = [st.Page("pfd/app/pages/dashboard.py", title="Dashboard")]

pg = st.navigation(pages)
pg.run()
