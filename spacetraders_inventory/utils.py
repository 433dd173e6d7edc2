import logging
import urllib.parse
from logging import FileHandler, StreamHandler
from sys import stdout

import requests

ST_LOGGER = logging.getLogger("API-Client")

BASE_URL = "https://api.spacetraders.io"
TRACER_NAME = "spacetrader-inventory"
ONLINE_STATUS = "spacetraders is currently online and available to play"

MAX_RETRIES_TIMEOUT = 5  # attempts, not retries after the first
WAIT_TIMEOUT = 10  # seconds between timed-out attempts
REQUEST_TIMEOUT = 5  # seconds
REQUESTS_PER_SECOND = 2
COLLECTION_FREQUENCY = 300000  # 5 min = 300000 ms


def _url(base_url: str, endpoint: str, token: str) -> str:
    "wraps the `endpoint` in the base_url and appends the token as a query parameter"
    token = urllib.parse.quote(token or "", safe="")
    return f"{base_url.rstrip('/')}/{endpoint}?token={token}"


def _redact(text: str, token: str) -> str:
    "masks the token, raw or url-quoted, wherever it appears in `text`"
    if not token:
        return text
    for secret in {token, urllib.parse.quote(token, safe="")}:
        text = text.replace(secret, "***")
    return text


def _log_response(response: requests.Response) -> None:
    "log the response from the server"
    # path only, the query string carries the token
    url_stub = urllib.parse.urlparse(response.url).path
    ST_LOGGER.debug(
        "%s %s %s bytes", response.status_code, url_stub, len(response.content or b"")
    )


def set_logging(filename: str = None, level=logging.INFO):
    format = "%(asctime)s:%(levelname)s:%(threadName)s:%(name)s  %(message)s"

    handlers = [StreamHandler(stdout)]
    if filename:
        handlers.append(FileHandler(filename))
    logging.basicConfig(
        handlers=handlers,
        level=level,
        format=format,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    ST_LOGGER.setLevel(level)
