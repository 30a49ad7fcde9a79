from dataclasses import dataclass, field
from typing import Literal

View = Literal[
    "home",
    "pets",
]
Style = Literal[
    "normal",
    "border",
    "title",
    "active",
    "shortcut",
    "highlight",
    "bold",
    "accent",
    "attribution",
    "message",
]

MENU_TITLES = ["Home", "Pets", "Add", "Delete", "Quit"]


@dataclass(frozen=True)
class KeyEvent:
    """A key press read by the input poller."""

    code: int


@dataclass(frozen=True)
class TickEvent:
    """Emitted once per tick interval so the loop redraws without input."""


Event = KeyEvent | TickEvent


@dataclass(frozen=True)
class DrawCommand:
    y: int
    x: int
    text: str
    style: Style = "normal"


@dataclass
class AppState:
    active_view: View = "home"
    selected_index: int | None = 0  # pets viewでの選択行
    menu_titles: list[str] = field(default_factory=lambda: list(MENU_TITLES))

    # UI用
    msg_footer: str | None = None  # フッターメッセージ表示 (エラー通知も兼ねる)
