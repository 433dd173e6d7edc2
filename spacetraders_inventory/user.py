import logging

from opentelemetry import trace

from .client_api import WebProxy
from .client_interface import InventoryProxy
from .errors import ServerError
from .models import ErrorDetails, Leaderboard, Ship, UserDetails
from .responses import (
    GameStatusResponse,
    InventoryResponse,
    LeaderboardResponse,
    ShipListResponse,
    UserDetailsResponse,
)
from .utils import TRACER_NAME

logger = logging.getLogger(__name__)


class User:
    """The authenticated account. Owns the token and the proxy used to reach the game.

    `details` holds the result of the latest successful `fetch_account_details`, and its username
    tags every span. `error` holds the error embedded in the latest payload, or the sentinel.
    """

    def __init__(
        self, token: str, proxy: InventoryProxy = None, tracer: trace.Tracer = None
    ) -> None:
        self.token = token
        self.proxy = proxy or WebProxy(token)
        self.tracer = tracer or trace.get_tracer(TRACER_NAME)
        self.details = UserDetails()
        self.error = ErrorDetails()

    @classmethod
    def login(
        cls, token: str, proxy: InventoryProxy = None, tracer: trace.Tracer = None
    ) -> "User":
        "creates a User and validates the token by fetching the account details straight away"
        user = cls(token, proxy, tracer)
        with user.tracer.start_as_current_span("User login"):
            user.fetch_account_details()
        return user

    def fetch_account_details(self) -> UserDetails:
        "/my/account - also refreshes `self.details`"
        self.details = self._fetch(
            "Get User Details", self.proxy.get_user_details, UserDetailsResponse
        ).data
        return self.details

    def fetch_ships(self) -> list[Ship]:
        "/my/ships"
        return self._fetch(
            "Get Ships Owned by User", self.proxy.get_ship_list, ShipListResponse
        ).data

    def fetch_leaderboard(self) -> Leaderboard:
        "/game/leaderboard/net-worth"
        return self._fetch(
            "Get Leaderboard", self.proxy.get_leaderboard, LeaderboardResponse
        ).data

    def fetch_status(self) -> int:
        """/game/status

        Returns:
            1 when the game is online and available to play, -1 for any other status text.
        """
        return self._fetch(
            "Get Game Status", self.proxy.get_game_status, GameStatusResponse
        ).online

    def _fetch(self, span_name: str, request, response_cls) -> InventoryResponse:
        # exceptions escaping the span are recorded on it and set its status to ERROR
        with self.tracer.start_as_current_span(
            span_name, attributes={"user.username": self.details.username}
        ):
            content = request()
            self.error = ErrorDetails()
            resp = response_cls(content)
            if not resp:
                self.error = resp.error
                raise ServerError(resp.error.code, resp.error.message)
            return resp
