import os
import re
from pathlib import Path

DEFAULT_HOME = os.environ.get("PC_HOME_DIR", (Path.home() / ".petcli").as_posix())
DEFAULT_DATA_PATH = (Path(DEFAULT_HOME) / "db.json").as_posix()
DEFAULT_ENV_PATH = (Path(DEFAULT_HOME) / "config.env").as_posix()
DEFAULT_TICK_MS = 200


def ensure_dirs() -> None:
    _path = Path(DEFAULT_HOME)
    _path.mkdir(parents=True, exist_ok=True)


def get_tick_ms(env: dict[str, str]) -> int:
    match os.environ.get("PC_TICK_MS", env.get("TICK_MS")):
        case None:
            return DEFAULT_TICK_MS
        case raw:
            try:
                tick_ms = int(raw)
            except ValueError as e:
                _msg = f"TICK_MS must be an integer: {raw}"
                raise ValueError(_msg) from e
            if tick_ms <= 0:
                _msg = f"TICK_MS must be positive: {tick_ms}"
                raise ValueError(_msg)
            return tick_ms


def load_env(path: str = DEFAULT_ENV_PATH) -> dict[str, str]:
    env: dict[str, str] = {}
    _path = Path(path)
    if _path.exists():
        with _path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                m = re.match(r"([^=]+)=(.*)", line)
                if m:
                    key = m.group(1).strip()
                    val = m.group(2).strip()
                    env[key] = val

    # OS環境変数を上書き優先
    env.update(
        {
            "DATA_PATH": os.environ.get("PC_DATA_PATH", env.get("DATA_PATH", DEFAULT_DATA_PATH)),
            "TICK_MS": str(get_tick_ms(env)),
        },
    )
    return env
