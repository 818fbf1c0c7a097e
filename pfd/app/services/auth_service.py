import logging
import streamlit as st

from pfd.backend import SupabaseClient, Session


logger = logging.getLogger(__name__)


class AuthService:
    session_key = 'auth_session'

    def __init__(self, client: SupabaseClient):
        self.client = client
        session = self.current_session()
        if session is not None:
            self.client.set_session(session.access_token)

    def current_session(self) -> Session | None:
        return st.session_state.get(self.session_key)

    def is_authenticated(self) -> bool:
        return self.current_session() is not None

    def current_user(self) -> dict | None:
        """
        Get the signed-in user from the backend, None when no user is signed in.

        Raises
        ------
        AuthError
            If the backend rejects the session, e.g. an expired access token
        """
        if not self.is_authenticated():
            return None
        return self.client.get_user()

    def sign_in(self, email: str, password: str) -> Session:
        """
        Sign in and keep the session for the rest of the browser session.

        Raises
        ------
        AuthError
            If the credentials are rejected
        """
        session = self.client.sign_in(email.strip(), password)
        st.session_state[self.session_key] = session
        return session

    def sign_up(self, email: str, password: str) -> bool:
        """
        Create an account. Returns True if the user is signed in right away, False if the email must be confirmed first.
        """
        session = self.client.sign_up(email.strip(), password)
        if session is None:
            return False
        st.session_state[self.session_key] = session
        return True

    def sign_out(self) -> None:
        """Drop the session, the local session is cleared even when the backend call fails"""
        try:
            self.client.sign_out()
        finally:
            self.clear_session()
            logger.info("signed out")

    def clear_session(self) -> None:
        """forget the local session without calling the backend, used when the backend rejects the access token"""
        st.session_state.pop(self.session_key, None)
        self.client.set_session(None)
