import logging
import sys

from .collector import InventoryCollector
from .config import InventoryConfig
from .client_api import WebProxy
from .errors import InventoryError
from .metrics import PrometheusMetricsSink, start_metrics_server
from .tracing import configure_tracing
from .user import User
from .utils import set_logging

logger = logging.getLogger(__name__)


def main(environ: dict = None) -> int:
    "starting point. Returns the process exit status."
    config = InventoryConfig.from_env(environ)
    set_logging(config.log_file)

    start_metrics_server(config.metrics_port)
    provider = configure_tracing(config.tracing_url, config.environment)
    try:
        try:
            user = User.login(config.token, WebProxy(config.token, config.base_url))
        except InventoryError as err:
            logger.critical("Login failed: %s", err)
            return 1
        logger.info("User logged in: %s", user.details.username)

        collector = InventoryCollector(
            user, PrometheusMetricsSink(), frequency=config.collection_frequency
        )
        try:
            collector.run()
        except InventoryError:
            # already logged by the collector
            return 1
    finally:
        provider.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
