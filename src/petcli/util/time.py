from datetime import datetime, timezone

from result import Err, Ok, Result

UTC = timezone.utc
DISPLAY_FMT = "%Y-%m-%d %H:%M:%S %Z"


def now_utc() -> datetime:
    return datetime.now(UTC)


def to_iso(dt: datetime) -> str:
    return dt.astimezone(UTC).isoformat()


def parse_iso(s: str) -> Result[datetime, str]:
    """ISO-8601文字列を UTC の datetime に変換する。

    末尾の "Z" も受け付ける。タイムゾーンが無い場合は UTC とみなす。
    """
    try:
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except (TypeError, ValueError, AttributeError) as e:
        return Err(f"Invalid timestamp: {s!r} ({e!s})")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return Ok(dt.astimezone(UTC))


def format_created_at(dt: datetime) -> str:
    return dt.astimezone(UTC).strftime(DISPLAY_FMT)
