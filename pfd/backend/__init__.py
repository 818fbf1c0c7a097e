from .exceptions import BackendError, AuthError
from .client import SupabaseClient, Session

__all__ = ['SupabaseClient', 'Session', 'BackendError', 'AuthError']
