# salesmanago_errors.py - exceptions raised by the SalesManago client


class SalesManagoError(Exception):
    """Base class for every error raised by the client."""


class InvalidArgumentError(SalesManagoError, ValueError):
    """A required configuration value was empty."""

    def __init__(self, field, value):
        super().__init__(f"{field} parameter is required")
        self.field = field
        self.value = value


class InvalidRequestError(SalesManagoError):
    """
    The API answered with something other than a successful JSON object.

    Raised in two situations:
      - the body could not be decoded as JSON (see from_parse_error);
        `previous` then holds the decoding error
      - the body decoded but is not an object, has no `success` key,
        or `success` is falsy; `previous` is None
    """

    def __init__(self, method, url, data, response, previous=None):
        status = getattr(response, "status_code", None)
        message = f"Error occurred when sending request {method} {url} (status: {status})"
        if previous is not None:
            message += f": {previous}"
        super().__init__(message)
        self.method = method
        self.url = url
        self.data = data
        self.response = response
        self.previous = previous

    @classmethod
    def from_parse_error(cls, method, url, data, response, error):
        exc = cls(method, url, data, response, previous=error)
        exc.__cause__ = error
        return exc

    @property
    def raw_body(self):
        return getattr(self.response, "text", None)
