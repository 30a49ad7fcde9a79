import curses

# color pair indexes
MAIN_THEME_COLOR = 1
ACTIVE_TAB_COLOR = 2
SELECTED_ROW_COLOR = 3
ACCENT_COLOR = 4
ATTRIBUTION_COLOR = 5
MESSAGE_COLOR = 6

MENU_HEIGHT = 3
FOOTER_HEIGHT = 3
MAIN_MIN_HEIGHT = 2
APP_MARGIN = 2

LIST_WIDTH_PERCENT = 20
DETAIL_COLUMNS = [
    ("ID", 12),
    ("Name", 20),
    ("Category", 15),
    ("Age", 8),
    ("Created At", 35),
]

ATTRIBUTION = "pet-CLI 2020 - all rights reserved"

# key bindings
KEY_CTRL_C = 3
KEYS_QUIT = (ord("q"), ord("Q"), KEY_CTRL_C)
KEYS_HOME = (ord("h"),)
KEYS_PETS = (ord("p"),)
KEYS_ADD = (ord("a"),)
KEYS_DELETE = (ord("d"),)
KEYS_NEXT = (ord("j"), curses.KEY_DOWN)
KEYS_PREV = (ord("k"), curses.KEY_UP)


class HomeLines:
    """Lines of the welcome block on the home view."""

    @classmethod
    def lines(cls) -> list[tuple[str, str]]:
        return [
            ("", "normal"),
            ("Welcome", "normal"),
            ("", "normal"),
            ("to", "normal"),
            ("", "normal"),
            ("pet-CLI", "accent"),
            ("", "normal"),
            (cls._help_line(), "normal"),
            (cls._move_line(), "normal"),
        ]

    @classmethod
    def _help_line(cls) -> str:
        help_line = "Press 'p' to access pets, 'a' to add random new pets "
        help_line += "and 'd' to delete the currently selected pet."
        return help_line

    @classmethod
    def _move_line(cls) -> str:
        return "Use 'j'/'k' to move the selection, 'h' to come back here and 'q' to quit."
