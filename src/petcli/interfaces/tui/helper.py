import unicodedata


def _char_width(ch: str) -> int:
    """Calculate the width of a character in the terminal."""
    if len(ch) == 0:
        return 0
    # 制御文字
    if ch < " ":
        return 0
    # 結合文字 (濁点など)
    if unicodedata.combining(ch):
        return 0
    # 東アジア文字幅プロパティ
    # F: full-width, W: wide, A: ambiguous を2倍にして返す
    if unicodedata.east_asian_width(ch) in ("F", "W", "A"):
        return 2
    return 1


def _string_width(s: str) -> int:
    """Calculate the width of a string in the terminal."""
    return sum(map(_char_width, s))


def _clip(s: str, width: int) -> str:
    """Cut a string so that its terminal width fits in `width` cells."""
    if width <= 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in s:
        w = _char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def _ljust(s: str, width: int) -> str:
    s = _clip(s, width)
    return s + " " * (width - _string_width(s))


def _center_offset(s: str, width: int) -> int:
    return max(0, (width - _string_width(s)) // 2)
