import os
from dataclasses import dataclass

from .utils import BASE_URL, COLLECTION_FREQUENCY


@dataclass
class InventoryConfig:
    """Settings read once from the environment at startup.

    `collection_frequency` is in milliseconds.
    """

    token: str
    tracing_url: str = None
    metrics_port: int = 9091
    collection_frequency: int = COLLECTION_FREQUENCY
    base_url: str = BASE_URL
    log_file: str = None
    environment: str = "demo"

    @classmethod
    def from_env(cls, environ: dict = None):
        environ = os.environ if environ is None else environ
        token = environ.get("USER_TOKEN", "")
        if not token:
            raise ValueError("USER_TOKEN must be set")
        return cls(
            token=token,
            tracing_url=environ.get("TRACING_URL") or None,
            metrics_port=_int(environ, "METRICS_PORT", 9091),
            collection_frequency=_int(
                environ, "COLLECTION_FREQUENCY", COLLECTION_FREQUENCY
            ),
            base_url=environ.get("API_BASE_URL") or BASE_URL,
            log_file=environ.get("LOG_FILE") or None,
            environment=environ.get("ENVIRONMENT") or "demo",
        )


def _int(environ: dict, key: str, default: int) -> int:
    value = environ.get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as err:
        raise ValueError(f"{key} must be an integer, got {value!r}") from err
