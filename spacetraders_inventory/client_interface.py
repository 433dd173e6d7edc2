from typing import Protocol, runtime_checkable


@runtime_checkable
class InventoryProxy(Protocol):
    """Everything the User needs from the game API. Every call returns the raw response body.

    Implementations raise `TransportError` when no body could be fetched."""

    def get_user_details(self) -> bytes:
        "/my/account"
        pass

    def get_ship_list(self) -> bytes:
        "/my/ships"
        pass

    def get_leaderboard(self) -> bytes:
        "/game/leaderboard/net-worth"
        pass

    def get_game_status(self) -> bytes:
        "/game/status"
        pass
