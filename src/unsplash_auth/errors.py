"""Errors raised while fetching and parsing the Unsplash user profile."""


class InternalOAuthError(Exception):
    """Transport failure while talking to Unsplash; wraps the underlying error."""

    def __init__(self, message: str, oauth_error: Exception):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        return f"{self.message}: {self.oauth_error}"


class ProfileParseError(ValueError):
    """The /me response body was not valid JSON."""

    def __init__(self, body: str, error: Exception):
        super().__init__(f"invalid profile response: {error}")
        self.body = body
        self.error = error
