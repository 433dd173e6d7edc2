from dataclasses import dataclass, field


@dataclass
class ErrorDetails:
    "the `error` object the API embeds in its payloads. The defaults mean 'no error'."
    message: str = ""
    code: int = -1

    @classmethod
    def from_json(cls, json_data: dict):
        if not json_data:
            return cls()
        return cls(
            str(json_data.get("message") or ""),
            int(-1 if json_data.get("code") is None else json_data["code"]),
        )

    def __bool__(self):
        return len(self.message) > 0


@dataclass
class UserDetails:
    # response from /my/account, nested under "user"
    username: str = ""
    credits: int = 0
    ship_count: int = 0
    structure_count: int = 0
    joined_at: str = ""

    @classmethod
    def from_json(cls, json_data: dict):
        return cls(
            username=str(json_data.get("username") or ""),
            credits=int(json_data.get("credits") or 0),
            ship_count=int(json_data.get("shipCount") or 0),
            structure_count=int(json_data.get("structureCount") or 0),
            joined_at=str(json_data.get("joinedAt") or ""),
        )


@dataclass
class Ship:
    id: str
    ship_class: str
    type: str
    manufacturer: str
    location: str = ""
    flight_plan_id: str = ""
    max_cargo: int = 0
    plating: int = 0
    space_available: int = 0
    speed: int = 0
    weapons: int = 0
    x: int = 0
    y: int = 0

    @classmethod
    def from_json(cls, json_data: dict):
        return cls(
            id=str(json_data.get("id") or ""),
            ship_class=str(json_data.get("class") or ""),
            type=str(json_data.get("type") or ""),
            manufacturer=str(json_data.get("manufacturer") or ""),
            location=str(json_data.get("location") or ""),
            flight_plan_id=str(json_data.get("flightPlanId") or ""),
            max_cargo=int(json_data.get("maxCargo") or 0),
            plating=int(json_data.get("plating") or 0),
            space_available=int(json_data.get("spaceAvailable") or 0),
            speed=int(json_data.get("speed") or 0),
            weapons=int(json_data.get("weapons") or 0),
            x=int(json_data.get("x") or 0),
            y=int(json_data.get("y") or 0),
        )


@dataclass
class UserRank:
    username: str = ""
    net_worth: int = 0
    rank: int = 0

    @classmethod
    def from_json(cls, json_data: dict):
        return cls(
            str(json_data.get("username") or ""),
            int(json_data.get("netWorth") or 0),
            int(json_data.get("rank") or 0),
        )


@dataclass
class Leaderboard:
    net_worth: list[UserRank] = field(default_factory=list)
    user_net_worth: UserRank = field(default_factory=UserRank)

    @classmethod
    def from_json(cls, json_data: dict):
        return cls(
            [UserRank.from_json(d) for d in json_data.get("netWorth") or []],
            UserRank.from_json(json_data.get("userNetWorth") or {}),
        )
