# salesmanago_client.py - signed JSON client for the SalesManago REST API
import hashlib
import json
import time
from dataclasses import dataclass

from api_client import APIClient
from salesmanago_errors import InvalidArgumentError, InvalidRequestError
from utils.config import load_config, load_timeout
from utils.log import get_logger

logger = get_logger("salesmanago")

METHOD_POST = "POST"
METHOD_GET = "GET"

REDACTED_KEYS = ("apiKey", "sha")


@dataclass(frozen=True)
class ClientConfig:
    client_id: str
    endpoint: str
    api_secret: str
    api_key: str


class Client:
    """
    SalesManago API client.

    Every call carries an auth envelope (clientId, apiKey, requestTime, sha)
    merged with the caller's data. The transport is anything exposing
    request(method, url, options) and returning an object with `.text` and
    `.status_code`; see api_client.APIClient for the requests-backed one.
    """

    def __init__(self, transport, client_id: str, endpoint: str, api_secret: str, api_key: str):
        raw = {
            "client_id": client_id,
            "endpoint": endpoint,
            "api_secret": api_secret,
            "api_key": api_key,
        }
        for key, value in raw.items():
            if value is None or not str(value).strip():
                raise InvalidArgumentError(key, value)

        self.transport = transport
        self.config = ClientConfig(
            client_id=client_id,
            endpoint=endpoint.rstrip("/") + "/",
            api_secret=api_secret,
            api_key=api_key,
        )

    @classmethod
    def from_env(cls, transport=None, environ=None):
        if transport is None:
            transport = APIClient(timeout=load_timeout(environ))
        return cls(transport, **load_config(environ))

    def close(self):
        """Close the transport if it holds resources (e.g. a requests.Session)."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def do_post(self, api_method: str, data: dict, options: dict = None) -> dict:
        """Send a signed POST request to `endpoint + api_method`."""
        return self._do_request(METHOD_POST, api_method, data, options)

    def do_get(self, api_method: str, data: dict, options: dict = None) -> dict:
        """Send a signed GET request to `endpoint + api_method`."""
        return self._do_request(METHOD_GET, api_method, data, options)

    def _do_request(self, method, api_method, data=None, options=None):
        url = self.config.endpoint + api_method
        data = merge_data(self.create_auth_data(), data or {})

        request_options = {"json": data, "http_errors": False}
        request_options.update(options or {})

        logger.debug("%s %s payload=%s", method, url, redact(data))
        response = self.transport.request(method, url, request_options)
        logger.debug("%s %s -> %s", method, url, getattr(response, "status_code", None))

        try:
            content = json.loads(response.text, parse_constant=_reject_constant)
        except (TypeError, ValueError) as e:
            logger.warning("%s %s returned a non-JSON body: %s", method, url, e)
            raise InvalidRequestError.from_parse_error(method, url, data, response, e) from e

        if not isinstance(content, dict) or not content.get("success"):
            logger.warning("%s %s was not successful: %s", method, url, response.text)
            raise InvalidRequestError(method, url, data, response)

        return content

    def create_auth_data(self, request_time: int = None) -> dict:
        cfg = self.config
        return {
            "clientId": cfg.client_id,
            "apiKey": cfg.api_key,
            "requestTime": int(time.time()) if request_time is None else request_time,
            "sha": sign(cfg.api_key, cfg.client_id, cfg.api_secret),
        }


def _reject_constant(token):
    raise ValueError(f"invalid JSON constant: {token}")


def sign(api_key: str, client_id: str, api_secret: str) -> str:
    return hashlib.sha1((api_key + client_id + api_secret).encode("utf-8")).hexdigest()


def merge_data(base: dict, replacements: dict) -> dict:
    """Overlay `replacements` on `base` and drop keys whose value is None."""
    merged = {**base, **replacements}
    return {k: v for k, v in merged.items() if v is not None}


def redact(data: dict) -> dict:
    return {k: ("[REDACTED]" if k in REDACTED_KEYS else v) for k, v in data.items()}
