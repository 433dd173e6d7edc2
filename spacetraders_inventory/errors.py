class InventoryError(Exception):
    "base class for everything that can go wrong while polling the game"


class TransportError(InventoryError):
    "the request never produced a response body (network failure, or timeouts until retries ran out)"


class DecodeError(InventoryError):
    "the response body could not be parsed into the expected shape"


class ServerError(InventoryError):
    """The game answered with a well-formed payload that carries an `error` object.

    Raised even when the HTTP call itself returned 200."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"ERROR FROM SERVER ({code}): {message}")
