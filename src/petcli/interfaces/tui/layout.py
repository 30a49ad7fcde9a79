from dataclasses import dataclass

from petcli.interfaces.tui.style import (
    APP_MARGIN,
    FOOTER_HEIGHT,
    LIST_WIDTH_PERCENT,
    MAIN_MIN_HEIGHT,
    MENU_HEIGHT,
)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int) -> "Rect":
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class AppRects:
    menu: Rect
    main: Rect
    footer: Rect


@dataclass(frozen=True)
class PetRects:
    names: Rect
    details: Rect


def create_app_rects(area: Rect) -> AppRects:
    """Split the screen into menu / main / footer inside the outer margin.

    The menu is placed first, then the footer as long as the main area keeps
    MAIN_MIN_HEIGHT rows. On a very small terminal the main area may still be
    shorter than that (or zero).
    """
    body = area.inner(APP_MARGIN)
    menu_height = min(MENU_HEIGHT, body.height)
    footer_height = min(FOOTER_HEIGHT, max(0, body.height - menu_height - MAIN_MIN_HEIGHT))
    main_height = body.height - menu_height - footer_height
    return AppRects(
        menu=Rect(body.x, body.y, body.width, menu_height),
        main=Rect(body.x, body.y + menu_height, body.width, main_height),
        footer=Rect(body.x, body.y + menu_height + main_height, body.width, footer_height),
    )


def create_pet_rects(parent: Rect) -> PetRects:
    names_width = parent.width * LIST_WIDTH_PERCENT // 100
    return PetRects(
        names=Rect(parent.x, parent.y, names_width, parent.height),
        details=Rect(parent.x + names_width, parent.y, parent.width - names_width, parent.height),
    )


def column_widths(total: int, percents: list[int]) -> list[int]:
    return [total * p // 100 for p in percents]
