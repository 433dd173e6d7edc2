import yaml

from .errors import DecodeError
from .models import ErrorDetails, Leaderboard, Ship, UserDetails
from .utils import ONLINE_STATUS


class _PayloadLoader(yaml.SafeLoader):
    "SafeLoader that leaves timestamps as the text the server sent"


_PayloadLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", lambda loader, node: loader.construct_scalar(node)
)


class InventoryResponse:
    """base class for all responses.

    The API puts its `error` object in the same envelope as the domain fields, so the error is
    decoded first and, when present, wins: `data` stays None and the response is falsy.
    """

    def __init__(self, content: bytes):
        self._response = self._load(content)
        self.data = None
        try:
            self.error = ErrorDetails.from_json(self._response.get("error"))
            if not self.error:
                self.data = self.parse()
        except (AttributeError, TypeError, ValueError) as err:
            raise DecodeError(f"unexpected payload shape: {err}") from err

    @staticmethod
    def _load(content: bytes) -> dict:
        try:
            payload = yaml.load(content, Loader=_PayloadLoader)
        except yaml.YAMLError as err:
            raise DecodeError(f"could not parse response: {err}") from err
        if not isinstance(payload, dict):
            raise DecodeError(
                f"expected a mapping, got {type(payload).__name__}: {content[:80]!r}"
            )
        return payload

    def parse(self):
        "takes the decoded payload and returns the typed domain value"
        pass

    def __bool__(self):
        return not self.error


class UserDetailsResponse(InventoryResponse):
    "/my/account"

    def parse(self) -> UserDetails:
        return UserDetails.from_json(self._response.get("user") or {})


class ShipListResponse(InventoryResponse):
    "/my/ships"

    def parse(self) -> list[Ship]:
        return [Ship.from_json(d) for d in self._response.get("ships") or []]


class LeaderboardResponse(InventoryResponse):
    "/game/leaderboard/net-worth"

    def parse(self) -> Leaderboard:
        return Leaderboard.from_json(self._response)


class GameStatusResponse(InventoryResponse):
    "/game/status"

    def parse(self) -> str:
        return str(self._response.get("status") or "")

    @property
    def online(self) -> int:
        "1 when the game is up and available, -1 for anything else"
        return 1 if self.data == ONLINE_STATUS else -1
