import curses
import locale
from dataclasses import dataclass

from petcli.core.models import Pet
from petcli.interfaces.tui.data import AppState, DrawCommand, Style
from petcli.interfaces.tui.render import render
from petcli.interfaces.tui.style import (
    ACCENT_COLOR,
    ACTIVE_TAB_COLOR,
    ATTRIBUTION_COLOR,
    MAIN_THEME_COLOR,
    MESSAGE_COLOR,
    SELECTED_ROW_COLOR,
)
from petcli.util.logger import setup_logger

logger = setup_logger("petcli", is_stream=False, is_file=True)

locale.setlocale(locale.LC_ALL, "")


@dataclass
class AppView:
    """AppView class to paint a rendered frame with curses.

    Attributes:
        stdscr: curses.window
        state: AppState
    """

    stdscr: curses.window
    state: AppState

    def init_curses(self) -> None:
        # raw mode: Ctrl-C arrives as a key instead of SIGINT
        curses.raw()
        curses.noecho()
        curses.curs_set(0)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            # color pair indexes (idx, foreground, background)
            curses.init_pair(MAIN_THEME_COLOR, curses.COLOR_WHITE, -1)  # borders/text
            curses.init_pair(ACTIVE_TAB_COLOR, curses.COLOR_YELLOW, -1)  # active tab, shortcut
            curses.init_pair(SELECTED_ROW_COLOR, curses.COLOR_BLACK, curses.COLOR_YELLOW)  # selected row
            curses.init_pair(ACCENT_COLOR, curses.COLOR_BLUE, -1)  # "pet-CLI"
            curses.init_pair(ATTRIBUTION_COLOR, curses.COLOR_CYAN, -1)  # footer text
            curses.init_pair(MESSAGE_COLOR, curses.COLOR_RED, -1)  # status message

    def restore(self) -> None:
        """Show the cursor again; curses.wrapper's endwin does the rest."""
        try:
            curses.curs_set(1)
        except curses.error:
            logger.exception("Error (cursor on)")

    def draw(self, pets: list[Pet]) -> None:
        """Render the current state and paint it."""
        self.stdscr.erase()
        max_y, max_x = self.stdscr.getmaxyx()
        for cmd in render(self.state, pets, max_x, max_y):
            self._paint(cmd, max_y, max_x)
        self.stdscr.refresh()

    def _attr(self, style: Style) -> int:
        color = curses.has_colors()

        def pair(idx: int) -> int:
            return curses.color_pair(idx) if color else 0

        match style:
            case "normal" | "border":
                return pair(MAIN_THEME_COLOR)
            case "title":
                return pair(MAIN_THEME_COLOR) | curses.A_BOLD
            case "active":
                return pair(ACTIVE_TAB_COLOR)
            case "shortcut":
                return pair(ACTIVE_TAB_COLOR) | curses.A_UNDERLINE
            case "highlight":
                return pair(SELECTED_ROW_COLOR) | curses.A_BOLD | (0 if color else curses.A_REVERSE)
            case "bold":
                return curses.A_BOLD
            case "accent":
                return pair(ACCENT_COLOR) | curses.A_BOLD
            case "attribution":
                return pair(ATTRIBUTION_COLOR)
            case "message":
                return pair(MESSAGE_COLOR) | curses.A_BOLD
        return 0

    def _paint(self, cmd: DrawCommand, max_y: int, max_x: int) -> None:
        # 画面外なら描かない
        if cmd.y < 0 or cmd.y >= max_y or cmd.x < 0 or cmd.x >= max_x:
            return
        limit = max_x - cmd.x
        # 最終行では右端1マスを開ける
        if cmd.y == max_y - 1:
            limit -= 1
        n = min(len(cmd.text), limit)
        if n <= 0:
            return
        try:
            self.stdscr.addnstr(cmd.y, cmd.x, cmd.text, n, self._attr(cmd.style))
        except curses.error:
            logger.debug(f"Error (paint) at y={cmd.y} x={cmd.x}")
