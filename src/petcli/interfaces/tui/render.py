import textwrap

from petcli.core.models import Pet
from petcli.interfaces.tui.data import AppState, DrawCommand, Style
from petcli.interfaces.tui.helper import _center_offset, _clip, _ljust, _string_width
from petcli.interfaces.tui.layout import Rect, column_widths, create_app_rects, create_pet_rects
from petcli.interfaces.tui.style import ATTRIBUTION, DETAIL_COLUMNS, HomeLines
from petcli.util.time import format_created_at

MENU_DIVIDER = " | "


def render(state: AppState, pets: list[Pet], width: int, height: int) -> list[DrawCommand]:
    """Build the draw commands for one frame.

    Pure function of the app state and a pets snapshot. Nothing here touches
    curses, so frames can be inspected in tests.

    Args:
        state: current app state
        pets: pets read from the store for this frame
        width: terminal columns
        height: terminal rows

    Returns:
        list[DrawCommand]: commands in paint order
    """
    cmds: list[DrawCommand] = []
    rects = create_app_rects(Rect(0, 0, width, height))

    _draw_menu(cmds, rects.menu, state)
    match state.active_view:
        case "home":
            _draw_home(cmds, rects.main)
        case "pets":
            pet_rects = create_pet_rects(rects.main)
            _draw_pet_list(cmds, pet_rects.names, pets, state.selected_index)
            _draw_pet_detail(cmds, pet_rects.details, selected_pet(pets, state.selected_index))
    _draw_footer(cmds, rects.footer, state.msg_footer)
    return cmds


def selected_pet(pets: list[Pet], selected_index: int | None) -> Pet | None:
    if selected_index is None or not 0 <= selected_index < len(pets):
        return None
    return pets[selected_index]


# ---- primitives --------------------------------------------------------


def _text(cmds: list[DrawCommand], y: int, x: int, text: str, width: int, style: Style = "normal") -> int:
    """Append a clipped text command and return the width actually used."""
    text = _clip(text, width)
    if text:
        cmds.append(DrawCommand(y, x, text, style))
    return _string_width(text)


def _block(cmds: list[DrawCommand], rect: Rect, title: str) -> Rect:
    """Draw a bordered block with a title and return its inner rect."""
    if rect.width < 2 or rect.height < 2:
        return Rect(rect.x, rect.y, 0, 0)
    inner_width = rect.width - 2
    top = _clip(title, inner_width)
    cmds.append(DrawCommand(rect.y, rect.x, "┌", "border"))
    if top:
        cmds.append(DrawCommand(rect.y, rect.x + 1, top, "title"))
    rest = inner_width - _string_width(top)
    cmds.append(DrawCommand(rect.y, rect.x + 1 + _string_width(top), "─" * rest + "┐", "border"))
    for row in range(1, rect.height - 1):
        cmds.append(DrawCommand(rect.y + row, rect.x, "│", "border"))
        cmds.append(DrawCommand(rect.y + row, rect.x + rect.width - 1, "│", "border"))
    cmds.append(DrawCommand(rect.y + rect.height - 1, rect.x, "└" + "─" * inner_width + "┘", "border"))
    return rect.inner(1)


# ---- menu / footer -----------------------------------------------------


def _active_menu_index(state: AppState) -> int:
    match state.active_view:
        case "home":
            return 0
        case "pets":
            return 1
    return 0


def _draw_menu(cmds: list[DrawCommand], rect: Rect, state: AppState) -> None:
    inner = _block(cmds, rect, "Menu")
    if inner.is_empty:
        return
    active = _active_menu_index(state)
    x = inner.x
    remaining = inner.width
    for i, title in enumerate(state.menu_titles):
        if i > 0:
            used = _text(cmds, inner.y, x, MENU_DIVIDER, remaining, "normal")
            x += used
            remaining -= used
        # first char hints the shortcut key
        first, rest = title[:1], title[1:]
        used = _text(cmds, inner.y, x, first, remaining, "shortcut")
        x += used
        remaining -= used
        used = _text(cmds, inner.y, x, rest, remaining, "active" if i == active else "normal")
        x += used
        remaining -= used
        if remaining <= 0:
            return


def _draw_footer(cmds: list[DrawCommand], rect: Rect, msg: str | None) -> None:
    inner = _block(cmds, rect, "Copyright")
    if inner.is_empty:
        return
    x = inner.x + _center_offset(ATTRIBUTION, inner.width)
    _text(cmds, inner.y, x, ATTRIBUTION, inner.width, "attribution")
    if msg:
        # status messages sit on the bottom border
        _text(cmds, rect.y + rect.height - 1, rect.x + 1, f" {msg} ", inner.width, "message")


# ---- home --------------------------------------------------------------


def _draw_home(cmds: list[DrawCommand], rect: Rect) -> None:
    inner = _block(cmds, rect, "Home")
    if inner.is_empty:
        return
    row = 0
    for line, style in HomeLines.lines():
        wrapped = textwrap.wrap(line, inner.width) or [""]
        for chunk in wrapped:
            if row >= inner.height:
                return
            x = inner.x + _center_offset(chunk, inner.width)
            _text(cmds, inner.y + row, x, chunk, inner.width, style)  # type: ignore[arg-type]
            row += 1


# ---- pets --------------------------------------------------------------


def _draw_pet_list(cmds: list[DrawCommand], rect: Rect, pets: list[Pet], selected_index: int | None) -> None:
    inner = _block(cmds, rect, "Pets")
    if inner.is_empty or not pets:
        return
    # keep the selected row visible
    offset = 0
    if selected_index is not None and selected_index >= inner.height:
        offset = selected_index - inner.height + 1
    for row, idx in enumerate(range(offset, min(offset + inner.height, len(pets)))):
        if idx == selected_index:
            _text(cmds, inner.y + row, inner.x, _ljust(pets[idx].name, inner.width), inner.width, "highlight")
        else:
            _text(cmds, inner.y + row, inner.x, pets[idx].name, inner.width, "normal")


def _detail_cells(pet: Pet) -> list[str]:
    return [
        str(pet.id),
        pet.name,
        pet.category,
        str(pet.age),
        format_created_at(pet.created_at),
    ]


def _draw_row(cmds: list[DrawCommand], inner: Rect, y: int, cells: list[str], style: Style) -> None:
    widths = column_widths(inner.width, [p for _, p in DETAIL_COLUMNS])
    x = inner.x
    for cell, w in zip(cells, widths, strict=True):
        # one cell of spacing like the table widget's column spacing
        _text(cmds, y, x, cell, max(0, w - 1), style)
        x += w


def _draw_pet_detail(cmds: list[DrawCommand], rect: Rect, pet: Pet | None) -> None:
    inner = _block(cmds, rect, "Detail")
    if inner.is_empty:
        return
    _draw_row(cmds, inner, inner.y, [name for name, _ in DETAIL_COLUMNS], "bold")
    if pet is None or inner.height < 2:
        return
    _draw_row(cmds, inner, inner.y + 1, _detail_cells(pet), "normal")
