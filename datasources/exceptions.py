# datasources/exceptions.py

from typing import Optional


class Korrel8rError(Exception):
    pass


class Korrel8rUnavailable(Korrel8rError):
    pass


class Korrel8rTimeout(Korrel8rError):
    pass


class Korrel8rRequestError(Korrel8rError):
    def __init__(self, message: str, status_code: Optional[int] = None, server_error: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        # message from a korrel8r {"error": ...} response body, if there was one
        self.server_error = server_error


class BackendStartupTimeout(Korrel8rError):
    pass
