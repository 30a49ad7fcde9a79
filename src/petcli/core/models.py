from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from result import Err, Ok, Result

from petcli.util.time import now_utc, parse_iso, to_iso

CATEGORIES = ("cats", "dogs")


@dataclass
class Pet:
    id: int
    name: str
    category: str
    age: int
    created_at: datetime = field(default_factory=now_utc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "age": self.age,
            "created_at": to_iso(self.created_at),
        }

    @staticmethod
    def from_dict(d: Any) -> Result["Pet", str]:
        """辞書から Pet を復元する。

        フィールドの欠落や型の不一致は Err で返す (例外は投げない)。
        """
        if not isinstance(d, dict):
            return Err(f"Pet entry must be a mapping, got {type(d).__name__}")
        missing = [k for k in ("id", "name", "category", "age", "created_at") if k not in d]
        if missing:
            return Err(f"Missing fields: {', '.join(missing)}")
        for key, typ in (("id", int), ("age", int), ("name", str), ("category", str)):
            # bool is a subclass of int
            if not isinstance(d[key], typ) or isinstance(d[key], bool):
                return Err(f"Field '{key}' must be {typ.__name__}: {d[key]!r}")
        created_at = d["created_at"]
        if isinstance(created_at, datetime):
            # yaml.safe_load already turns timestamps into datetime
            created_at = created_at.isoformat()
        match parse_iso(created_at):
            case Ok(dt):
                return Ok(
                    Pet(
                        id=d["id"],
                        name=d["name"],
                        category=d["category"],
                        age=d["age"],
                        created_at=dt,
                    ),
                )
            case Err(e):
                return Err(e)
            case _:
                return Err("Unexpected error")
