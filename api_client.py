# api_client.py - requests-backed HTTP transport used by the SalesManago client
import requests

from utils.log import get_logger

logger = get_logger("salesmanago.http")


class APIClient:
    """
    Minimal transport around a requests.Session.

    Exposes request(method, url, options) where options may carry:
      - json:        body, serialized as JSON
      - headers:     extra request headers
      - params:      query string parameters
      - timeout:     seconds (defaults to the instance timeout)
      - http_errors: raise requests.HTTPError on 4xx/5xx (default True)
    Any other key is passed to Session.request unchanged.
    """

    def __init__(self, timeout=30, session=None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method, url, options=None):
        kwargs = dict(options or {})
        http_errors = kwargs.pop("http_errors", True)
        kwargs.setdefault("timeout", self.timeout)

        resp = self.session.request(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        if http_errors:
            resp.raise_for_status()
        return resp

    def close(self):
        self.session.close()
