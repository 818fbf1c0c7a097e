import logging
import streamlit as st

from pfd.app.utils.config import load_config, get_supabase_settings
from pfd.backend import SupabaseClient


logger = logging.getLogger(__name__)


def get_backend_client() -> SupabaseClient:
    """
    Get the backend client of the current browser session. Every session holds its own client since the client carries
    the access token of the signed-in user.

    Returns
    -------
    SupabaseClient
        The client of the current session
    """
    if 'backend_client' not in st.session_state:
        url, key, timeout = get_supabase_settings(load_config())
        logger.debug("creating backend client for %s", url)
        st.session_state['backend_client'] = SupabaseClient(url, key, timeout=timeout)
    return st.session_state['backend_client']
