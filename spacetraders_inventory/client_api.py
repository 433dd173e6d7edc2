import logging
import time

import requests
from requests_ratelimiter import LimiterSession

from .errors import TransportError
from .utils import (
    BASE_URL,
    MAX_RETRIES_TIMEOUT,
    REQUEST_TIMEOUT,
    REQUESTS_PER_SECOND,
    WAIT_TIMEOUT,
    _log_response,
    _redact,
    _url,
)

logger = logging.getLogger(__name__)


class WebProxy:
    "implements InventoryProxy against the live API. Read-only, no caching."

    def __init__(
        self,
        token: str,
        base_url: str = None,
        session: requests.Session = None,
        max_retries: int = MAX_RETRIES_TIMEOUT,
        wait_timeout: float = WAIT_TIMEOUT,
        request_timeout: float = REQUEST_TIMEOUT,
        sleep=time.sleep,
    ) -> None:
        self.token = token
        self.base_url = base_url or BASE_URL
        self.session = session or LimiterSession(per_second=REQUESTS_PER_SECOND)
        self.max_retries = max_retries
        self.wait_timeout = wait_timeout
        self.request_timeout = request_timeout
        self._sleep = sleep

    def get_user_details(self) -> bytes:
        "/my/account"
        return self.get(_url(self.base_url, "my/account", self.token))

    def get_ship_list(self) -> bytes:
        "/my/ships"
        return self.get(_url(self.base_url, "my/ships", self.token))

    def get_leaderboard(self) -> bytes:
        "/game/leaderboard/net-worth"
        return self.get(_url(self.base_url, "game/leaderboard/net-worth", self.token))

    def get_game_status(self) -> bytes:
        "/game/status"
        return self.get(_url(self.base_url, "game/status", self.token))

    def get(self, url: str) -> bytes:
        """Fetch `url` and return the body, whatever the HTTP status.

        Timeouts are retried up to `max_retries` attempts with a fixed `wait_timeout` between them.
        Any other request failure is raised straight away.

        Raises:
            `TransportError`: the request failed, or every attempt timed out.
        """
        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.session.get(url, timeout=self.request_timeout)
            except requests.exceptions.Timeout as err:
                logger.warning(
                    "Timeout on attempt %s/%s: %s",
                    attempt,
                    self.max_retries,
                    _redact(str(err), self.token),
                )
                if attempt < self.max_retries:
                    self._sleep(self.wait_timeout)
                continue
            except requests.exceptions.RequestException as err:
                # requests puts the full url, token included, in its messages
                reason = _redact(str(err), self.token)
                logger.error("ConnectionError: %s", reason)
                raise TransportError(f"request failed: {reason}") from None
            _log_response(response)
            return response.content
        raise TransportError(f"exhausted retries after {self.max_retries} timeouts")
