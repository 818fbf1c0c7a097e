import logging
import streamlit as st

from pfd.app.services.auth_service import AuthService
from pfd.app.utils.config import ConfigError
from pfd.app.utils.connection import get_backend_client
from pfd.backend import AuthError, BackendError


logger = logging.getLogger(__name__)

st.title("Personal Finance Dashboard")

sign_in_tab, sign_up_tab = st.tabs(["Sign In", "Create Account"])

with sign_in_tab:
    with st.form(key='sign_in_form'):
        email = st.text_input("Email", key='sign_in_email')
        password = st.text_input("Password", type='password', key='sign_in_password')
        sign_in = st.form_submit_button("Sign In", type='primary')
    if sign_in:
        if not email or not password:
            st.error("Please enter your email and password")
        else:
            try:
                AuthService(get_backend_client()).sign_in(email, password)
            except AuthError as e:
                st.error(f"Sign in failed: {e.message}")
            except (BackendError, ConfigError) as e:
                logger.error("sign in failed: %s", e)
                st.error(e.message)
            else:
                st.rerun()

with sign_up_tab:
    with st.form(key='sign_up_form'):
        new_email = st.text_input("Email", key='sign_up_email')
        new_password = st.text_input("Password", type='password', key='sign_up_password')
        confirm_password = st.text_input("Confirm Password", type='password', key='sign_up_confirm_password')
        sign_up = st.form_submit_button("Create Account")
    if sign_up:
        if not new_email or not new_password:
            st.error("Please enter an email and a password")
        elif new_password != confirm_password:
            st.error("Passwords do not match")
        else:
            try:
                signed_in = AuthService(get_backend_client()).sign_up(new_email, new_password)
            except AuthError as e:
                st.error(f"Sign up failed: {e.message}")
            except (BackendError, ConfigError) as e:
                logger.error("sign up failed: %s", e)
                st.error(e.message)
            else:
                if signed_in:
                    st.rerun()
                st.success("Account created, please confirm your email and sign in")
