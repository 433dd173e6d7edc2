from .errors import TransportError


class StubProxy:
    """implements InventoryProxy from canned payloads. No network.

    Each endpoint takes either bytes/str (returned on every call), an exception (raised on every
    call), or a list of those, consumed one per call with the last entry repeating.
    """

    def __init__(
        self, user_details=None, ship_list=None, leaderboard=None, game_status=None
    ) -> None:
        self.payloads = {
            "user_details": user_details,
            "ship_list": ship_list,
            "leaderboard": leaderboard,
            "game_status": game_status,
        }
        self.calls = []

    def get_user_details(self) -> bytes:
        return self._next("user_details")

    def get_ship_list(self) -> bytes:
        return self._next("ship_list")

    def get_leaderboard(self) -> bytes:
        return self._next("leaderboard")

    def get_game_status(self) -> bytes:
        return self._next("game_status")

    def _next(self, endpoint: str) -> bytes:
        self.calls.append(endpoint)
        payload = self.payloads[endpoint]
        if isinstance(payload, list):
            payload = payload.pop(0) if len(payload) > 1 else payload[0]
        if payload is None:
            raise TransportError(f"no payload stubbed for {endpoint}")
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, str):
            payload = payload.encode()
        return payload
