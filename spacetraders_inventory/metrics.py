import logging
from typing import Protocol, runtime_checkable

from prometheus_client import REGISTRY, CollectorRegistry, Gauge, start_http_server

logger = logging.getLogger(__name__)

NAMESPACE = "spacetraderinventory"

SHIP_LABELS = [
    "username",
    "id",
    "class",
    "manufacturer",
    "type",
    "maxcargo",
    "plating",
    "speed",
    "weapons",
]

# name: (help, labels)
GAUGES = {
    "credits": ("How much credits user has", ["username"]),
    "game_status": ("Indicates if the game is up, running and available", ["username"]),
    "shipcount": ("Total of ships user has", ["username"]),
    "structurecount": ("Total of structure user has", ["username"]),
    "shipload": ("Unused space in ship cargo", SHIP_LABELS),
    "userrank": ("User rank in leaderboard", ["username"]),
}


@runtime_checkable
class MetricsSink(Protocol):
    def record(self, name: str, labels: dict, value: float) -> None:
        "set the gauge `name` for the given label values"
        pass


class PrometheusMetricsSink:
    "implements MetricsSink by registering one labelled Gauge per metric in a prometheus registry"

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry
        self.gauges = {
            name: Gauge(name, help_text, labels, namespace=NAMESPACE, registry=registry)
            for name, (help_text, labels) in GAUGES.items()
        }

    def record(self, name: str, labels: dict, value: float) -> None:
        self.gauges[name].labels(**labels).set(value)


def start_metrics_server(port: int, registry: CollectorRegistry = REGISTRY):
    "serves /metrics on `port` from a daemon thread, so scrapes never wait on the collector"
    logger.info("Exposing metrics on :%s/metrics", port)
    return start_http_server(port, registry=registry)
