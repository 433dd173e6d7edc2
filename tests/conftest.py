import json

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from spacetraders_inventory.utils import ONLINE_STATUS

USERNAME = "otaviokr"
TEST_TOKEN = "fd3c9cbf-7cc9-45be-b5e5-43a4153f5c35"


def account_payload(credits=1000, ship_count=2, structure_count=0, **extra) -> bytes:
    body = {
        "user": {
            "username": USERNAME,
            "credits": credits,
            "shipCount": ship_count,
            "structureCount": structure_count,
            "joinedAt": "2021-08-07T17:41:37.434Z",
        }
    }
    body.update(extra)
    return json.dumps(body).encode()


def ship_json(ship_id: str, space_available: int) -> dict:
    return {
        "id": ship_id,
        "location": "OE-PM-TR",
        "x": -20,
        "y": 5,
        "cargo": [],
        "spaceAvailable": space_available,
        "type": "JW-MK-I",
        "class": "MK-I",
        "maxCargo": 50,
        "loadingSpeed": 25,
        "speed": 1,
        "manufacturer": "Jackshaw",
        "plating": 5,
        "weapons": 5,
    }


def ships_payload(*ships: dict, **extra) -> bytes:
    body = {"ships": list(ships)}
    body.update(extra)
    return json.dumps(body).encode()


def leaderboard_payload(rank=5, **extra) -> bytes:
    body = {
        "netWorth": [
            {"username": "Toyota", "netWorth": 1200000000, "rank": 1},
            {"username": "Zuru", "netWorth": 700000000, "rank": 2},
        ],
        "userNetWorth": {"username": USERNAME, "netWorth": 1000, "rank": rank},
    }
    body.update(extra)
    return json.dumps(body).encode()


def status_payload(status=ONLINE_STATUS) -> bytes:
    return json.dumps({"status": status}).encode()


def error_payload(message="Token was invalid or missing from the request.", code=40101):
    return json.dumps({"error": {"message": message, "code": code}}).encode()


class RecordingSink:
    "implements MetricsSink by remembering every observation"

    def __init__(self) -> None:
        self.records = []

    def record(self, name: str, labels: dict, value: float) -> None:
        self.records.append((name, labels, value))

    def values(self, name: str) -> list:
        return [value for n, _, value in self.records if n == name]


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")
