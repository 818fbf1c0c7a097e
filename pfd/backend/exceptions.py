class BackendError(Exception):
    """Raised when a call to the hosted backend fails"""
    def __init__(self, message="Backend request failed", status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class AuthError(BackendError):
    """Raised when the backend rejects the user credentials or session"""
    def __init__(self, message="Authentication failed", status_code: int | None = None):
        super().__init__(message, status_code)
