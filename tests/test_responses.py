import pytest

from spacetraders_inventory.errors import DecodeError
from spacetraders_inventory.responses import (
    GameStatusResponse,
    LeaderboardResponse,
    ShipListResponse,
    UserDetailsResponse,
)

from conftest import (
    USERNAME,
    account_payload,
    error_payload,
    leaderboard_payload,
    ship_json,
    ships_payload,
    status_payload,
)


def test_user_details_response():
    resp = UserDetailsResponse(account_payload(credits=1000))
    assert resp
    assert resp.error.code == -1
    assert resp.data.username == USERNAME
    assert resp.data.credits == 1000


def test_ship_list_response_keeps_order():
    resp = ShipListResponse(ships_payload(ship_json("a", 10), ship_json("b", 20)))
    assert [ship.id for ship in resp.data] == ["a", "b"]


def test_leaderboard_response():
    resp = LeaderboardResponse(leaderboard_payload(rank=5))
    assert resp.data.user_net_worth.rank == 5
    assert [entry.rank for entry in resp.data.net_worth] == [1, 2]


def test_yaml_payloads_are_accepted():
    resp = GameStatusResponse(b"status: spacetraders is currently online and available to play\n")
    assert resp.online == 1


def test_error_wins_over_domain_fields():
    resp = UserDetailsResponse(account_payload(error={"message": "slow down", "code": 42901}))
    assert not resp
    assert resp.error.message == "slow down"
    assert resp.error.code == 42901
    assert resp.data is None


def test_error_only_payload():
    resp = ShipListResponse(error_payload())
    assert not resp
    assert resp.error.code == 40101


@pytest.mark.parametrize(
    "content",
    [
        b"",
        b"{not: valid: yaml",
        b"[1, 2, 3]",
        b"just a string",
        b'{"error": "not a mapping"}',
        b'{"user": {"username": "x", "credits": "lots"}}',
        b'{"user": ["not", "a", "mapping"]}',
    ],
)
def test_malformed_payloads(content):
    with pytest.raises(DecodeError):
        UserDetailsResponse(content)


@pytest.mark.parametrize(
    "status, expected",
    [
        ("spacetraders is currently online and available to play", 1),
        ("SpaceTraders is currently online and available to play", -1),
        ("offline", -1),
        ("", -1),
        ("spacetraders is down for maintenance", -1),
    ],
)
def test_game_status_online(status, expected):
    assert GameStatusResponse(status_payload(status)).online == expected


def test_game_status_without_status_field():
    assert GameStatusResponse(b"{}").online == -1


def test_unquoted_timestamps_keep_server_text():
    resp = UserDetailsResponse(
        b"user:\n"
        b"  username: otaviokr\n"
        b"  credits: 1000\n"
        b"  joinedAt: 2021-08-07T17:41:37.434Z\n"
    )
    assert resp.data.joined_at == "2021-08-07T17:41:37.434Z"


def test_null_numbers_decode_to_zero():
    resp = UserDetailsResponse(
        b'{"user": {"username": "otaviokr", "credits": null, "shipCount": null,'
        b' "structureCount": null, "joinedAt": null}}'
    )
    assert resp
    assert resp.data.credits == 0
    assert resp.data.ship_count == 0
    assert resp.data.structure_count == 0
    assert resp.data.joined_at == ""
