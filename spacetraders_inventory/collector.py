import logging
import time

from .errors import InventoryError
from .metrics import MetricsSink
from .user import User
from .utils import COLLECTION_FREQUENCY

logger = logging.getLogger(__name__)


class InventoryCollector:
    """Polls the game for one user on a fixed cadence and publishes what it finds.

    Steps run strictly in order: status, account details, leaderboard, ships. Later steps label
    their metrics with the username refreshed by the account details step.

    Any error from a fetch is fatal. It is logged and re-raised, and no further cycle runs.
    """

    def __init__(
        self,
        user: User,
        sink: MetricsSink,
        frequency: int = COLLECTION_FREQUENCY,
        clock=time.monotonic,
        sleep=time.sleep,
    ) -> None:
        self.user = user
        self.sink = sink
        self.frequency = frequency
        self._clock = clock
        self._sleep = sleep
        self.cycles = 0

    def run(self, max_cycles: int = None) -> None:
        "loops forever, or for `max_cycles` cycles when given"
        while max_cycles is None or self.cycles < max_cycles:
            start_time = self._clock()
            try:
                self.collect()
            except InventoryError as err:
                logger.critical("Collection failed, stopping: %s", err)
                raise
            self.cycles += 1

            elapsed = int((self._clock() - start_time) * 1000)
            wait = self.frequency - elapsed
            logger.info("Duration: %d / Wait: %d", elapsed, wait)
            if wait <= 0:
                logger.warning(
                    "Cycle took %dms, longer than the %dms interval. Not waiting.",
                    elapsed,
                    self.frequency,
                )
                continue
            if max_cycles is None or self.cycles < max_cycles:
                self._sleep(wait / 1000)

    def collect(self) -> None:
        "one full pass over the game state"
        user = self.user

        status = user.fetch_status()
        self.sink.record("game_status", {"username": user.details.username}, status)
        logger.info("Game status: %s", status)

        details = user.fetch_account_details()
        labels = {"username": details.username}
        self.sink.record("credits", labels, details.credits)
        self.sink.record("shipcount", labels, details.ship_count)
        self.sink.record("structurecount", labels, details.structure_count)
        logger.info("%s", details)

        board = user.fetch_leaderboard()
        self.sink.record("userrank", labels, board.user_net_worth.rank)
        logger.info("%s", board.user_net_worth)

        ships = user.fetch_ships()
        for ship in ships:
            self.sink.record(
                "shipload",
                {
                    "username": details.username,
                    "id": ship.id,
                    "class": ship.ship_class,
                    "manufacturer": ship.manufacturer,
                    "type": ship.type,
                    "maxcargo": str(ship.max_cargo),
                    "plating": str(ship.plating),
                    "speed": str(ship.speed),
                    "weapons": str(ship.weapons),
                },
                ship.space_available,
            )
            logger.info("%s", ship)
