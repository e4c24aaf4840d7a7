"""Authentication failures raised by the auth service."""


class AuthenticationError(Exception):
    """Base class for login failures. Surfaced to clients as HTTP 400."""

    #: Message returned to the client when detailed errors are enabled
    detail = "authentication failed"

    def __init__(self, login: str):
        super().__init__(f"{self.detail}: {login!r}")
        self.login = login


class UserNotFound(AuthenticationError):
    """No credential entry exists for the login."""

    detail = "user not found"


class InvalidCredentials(AuthenticationError):
    """The password does not match the stored hash."""

    detail = "invalid password"
