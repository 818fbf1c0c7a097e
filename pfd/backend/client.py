"""
A thin client for the hosted Supabase backend. Two REST APIs are used:

auth (GoTrue):
    POST /auth/v1/token?grant_type=password   sign in, returns an access token
    POST /auth/v1/signup                      create an account
    POST /auth/v1/logout                      revoke the access token
    GET  /auth/v1/user                        the user owning the access token

tables (PostgREST):
    GET    /rest/v1/<table>?<col>=<op>.<value>&order=<col>.<asc|desc>
    POST   /rest/v1/<table>
    PATCH  /rest/v1/<table>?<col>=eq.<value>
    DELETE /rest/v1/<table>?<col>=eq.<value>

Row level security on the backend limits every table call to the rows of the user owning the access token, so
the client never filters by user itself.
"""
import logging
import requests

from dataclasses import dataclass
from typing import Any, Literal

from pfd.backend.exceptions import BackendError, AuthError


logger = logging.getLogger(__name__)

Operator = Literal['eq', 'neq', 'gt', 'gte', 'lt', 'lte']
Filter = tuple[str, Operator, Any]


@dataclass
class Session:
    access_token: str
    user_id: str
    email: str | None


class SupabaseClient:
    def __init__(self, url: str, key: str, timeout: float = 10):
        """
        Initializes the client with the project url and its public (anon) key.

        Parameters
        ----------
        url : str
            The base url of the project, e.g. https://<project>.supabase.co
        key : str
            The anon key of the project. It is used as the bearer token until a user signs in.
        timeout : float
            Timeout in seconds of every request.
        """
        self.url = url.rstrip('/')
        self.key = key
        self.timeout = timeout
        self.access_token: str | None = None

    ####################################################################################################################
    # auth
    ####################################################################################################################
    def set_session(self, access_token: str | None) -> None:
        """Use the given access token for all subsequent requests, None falls back to the anon key"""
        self.access_token = access_token

    def sign_in(self, email: str, password: str) -> Session:
        """
        Sign in with email and password and keep the returned access token for the following requests.

        Parameters
        ----------
        email : str
            The user's email
        password : str
            The user's password

        Returns
        -------
        Session
            The new session

        Raises
        ------
        AuthError
            If the credentials are rejected
        """
        data = self._auth_request('POST', 'token', params={'grant_type': 'password'},
                                  json={'email': email, 'password': password})
        session = self._to_session(data)
        self.set_session(session.access_token)
        logger.info("signed in user %s", session.user_id)
        return session

    def sign_up(self, email: str, password: str) -> Session | None:
        """
        Create a new account. When the project requires email confirmation no session is returned and the user has to
        confirm the email before signing in.
        """
        data = self._auth_request('POST', 'signup', json={'email': email, 'password': password})
        if not data.get('access_token'):
            logger.info("signed up %s, waiting for email confirmation", email)
            return None
        session = self._to_session(data)
        self.set_session(session.access_token)
        logger.info("signed up and signed in user %s", session.user_id)
        return session

    def sign_out(self) -> None:
        """Revoke the current access token, does nothing when no user is signed in"""
        if self.access_token is None:
            return
        try:
            self._auth_request('POST', 'logout')
        finally:
            self.set_session(None)

    def get_user(self) -> dict | None:
        """Return the user owning the current access token, or None when no user is signed in"""
        if self.access_token is None:
            return None
        return self._auth_request('GET', 'user')

    ####################################################################################################################
    # tables
    ####################################################################################################################
    def select(self, table: str, filters: list[Filter] | None = None, order: str | None = None,
               ascending: bool = True) -> list[dict]:
        """
        Select all columns of the rows matching the filters.

        Parameters
        ----------
        table : str
            The table name
        filters : list[tuple[str, str, Any]] | None
            (column, operator, value) triplets, all of them must match. Several filters may share a column, e.g.
            [('date', 'gte', '2024-01-01'), ('date', 'lte', '2024-01-31')]
        order : str | None
            Column to order the rows by
        ascending : bool
            Order direction

        Returns
        -------
        list[dict]
            The matching rows
        """
        params = [('select', '*')] + self._filters_to_params(filters)
        if order is not None:
            params.append(('order', f"{order}.{'asc' if ascending else 'desc'}"))
        return self._table_request('GET', table, params=params)

    def insert(self, table: str, rows: list[dict]) -> list[dict]:
        """Insert the rows and return them as stored by the backend (with ids)"""
        logger.info("inserting %d row(s) into %s", len(rows), table)
        return self._table_request('POST', table, json=rows, headers={'Prefer': 'return=representation'})

    def update(self, table: str, values: dict, filters: list[Filter]) -> list[dict]:
        """Update the rows matching the filters with the given values and return the updated rows"""
        if not filters:
            raise ValueError("update requires at least one filter")
        logger.info("updating %s where %s", table, filters)
        return self._table_request('PATCH', table, params=self._filters_to_params(filters), json=values,
                                   headers={'Prefer': 'return=representation'})

    def delete(self, table: str, filters: list[Filter]) -> None:
        """Delete the rows matching the filters"""
        if not filters:
            raise ValueError("delete requires at least one filter")
        logger.info("deleting from %s where %s", table, filters)
        self._table_request('DELETE', table, params=self._filters_to_params(filters))

    ####################################################################################################################
    # internals
    ####################################################################################################################
    def _headers(self) -> dict:
        return {
            'apikey': self.key,
            'Authorization': f"Bearer {self.access_token or self.key}",
            'Content-Type': 'application/json',
        }

    @staticmethod
    def _filters_to_params(filters: list[Filter] | None) -> list[tuple[str, str]]:
        if not filters:
            return []
        return [(column, f'{op}.{value}') for column, op, value in filters]

    @staticmethod
    def _to_session(data: dict) -> Session:
        user = data.get('user') or {}
        return Session(
            access_token=data['access_token'],
            user_id=user.get('id'),
            email=user.get('email'),
        )

    def _auth_request(self, method: str, endpoint: str, **kwargs) -> dict:
        response = self._request(method, f'{self.url}/auth/v1/{endpoint}', **kwargs)
        if response.status_code in (400, 401, 403, 422):
            raise AuthError(self._error_message(response), response.status_code)
        self._raise_for_status(response)
        return response.json() if response.content else {}

    def _table_request(self, method: str, table: str, headers: dict | None = None, **kwargs) -> list[dict]:
        response = self._request(method, f'{self.url}/rest/v1/{table}', headers=headers, **kwargs)
        if response.status_code == 401:
            raise AuthError(self._error_message(response), response.status_code)
        self._raise_for_status(response)
        return response.json() if response.content else []

    def _request(self, method: str, url: str, headers: dict | None = None, **kwargs) -> requests.Response:
        all_headers = self._headers()
        if headers:
            all_headers.update(headers)
        logger.debug("%s %s params=%s", method, url, kwargs.get('params'))
        try:
            return requests.request(method, url, headers=all_headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("request to %s failed: %s", url, e)
            raise BackendError(f"Could not reach the backend: {e}") from e

    def _raise_for_status(self, response: requests.Response) -> None:
        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("backend returned %s: %s", response.status_code, message)
            raise BackendError(message, response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if not isinstance(body, dict):
            return str(body)
        for key in ('message', 'msg', 'error_description', 'error'):
            if body.get(key):
                return str(body[key])
        return f"HTTP {response.status_code}"
