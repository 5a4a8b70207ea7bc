# utils/config.py - read client settings from the environment
import os

ENV_PREFIX = "SALESMANAGO_"
DEFAULT_TIMEOUT = 30.0


def load_config(environ=None) -> dict:
    """
    Return keyword arguments for salesmanago_client.Client.

    Every value, secrets included, is stripped of surrounding whitespace.
    Unset variables come back as empty
    strings; the client rejects them with InvalidArgumentError naming the
    field.
    """
    env = os.environ if environ is None else environ
    return {
        "client_id": env.get(ENV_PREFIX + "CLIENT_ID", "").strip(),
        "endpoint": env.get(ENV_PREFIX + "ENDPOINT", "").strip(),
        "api_secret": env.get(ENV_PREFIX + "API_SECRET", "").strip(),
        "api_key": env.get(ENV_PREFIX + "API_KEY", "").strip(),
    }


def load_timeout(environ=None) -> float:
    env = os.environ if environ is None else environ
    return float(env.get(ENV_PREFIX + "TIMEOUT", DEFAULT_TIMEOUT))
