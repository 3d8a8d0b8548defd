"""
Chat color codes

Minecraft-style formatting codes: a section sign followed by one code
character. Messages in config files usually use an alternate character
(``&6Hello``) which is translated to the real one before sending.
"""

import re
from enum import Enum
from typing import Optional

COLOR_CHAR = "§"

# Colors, formats, reset and the hex marker 'x'
ALL_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

_STRIP_COLOR_PATTERN = re.compile("(?i)" + re.escape(COLOR_CHAR) + "[0-9A-FK-ORX]")


class ChatColor(Enum):
    """All supported color and format codes"""
    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_format(self) -> bool:
        """True for bold/italic/etc, False for colors and reset."""
        return self.value in "klmno"

    @property
    def is_color(self) -> bool:
        return not self.is_format and self is not ChatColor.RESET

    @classmethod
    def get_by_char(cls, code: str) -> Optional["ChatColor"]:
        """Look up a ChatColor by its code character (case-insensitive)."""
        try:
            return cls(code.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return COLOR_CHAR + self.value


def translate_alternate_color_codes(alt_char: str, text: str) -> str:
    """
    Translate alternate color codes into real ones.

    Only occurrences of ``alt_char`` immediately followed by a valid code are
    replaced, so ``"5 & 6"`` stays untouched while ``"&6Gold"`` becomes
    ``"§6Gold"``.

    Args:
        alt_char: The alternate color character, usually '&'
        text: Text containing alternate color codes

    Returns:
        Text with real color codes
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in ALL_CODES:
            chars[i] = COLOR_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def strip_color(text: Optional[str]) -> Optional[str]:
    """Remove all color codes from text."""
    if text is None:
        return None
    return _STRIP_COLOR_PATTERN.sub("", text)


_ANSI_CODES = {
    ChatColor.BLACK: "\033[0;30m",
    ChatColor.DARK_BLUE: "\033[0;34m",
    ChatColor.DARK_GREEN: "\033[0;32m",
    ChatColor.DARK_AQUA: "\033[0;36m",
    ChatColor.DARK_RED: "\033[0;31m",
    ChatColor.DARK_PURPLE: "\033[0;35m",
    ChatColor.GOLD: "\033[0;33m",
    ChatColor.GRAY: "\033[0;37m",
    ChatColor.DARK_GRAY: "\033[0;90m",
    ChatColor.BLUE: "\033[0;94m",
    ChatColor.GREEN: "\033[0;92m",
    ChatColor.AQUA: "\033[0;96m",
    ChatColor.RED: "\033[0;91m",
    ChatColor.LIGHT_PURPLE: "\033[0;95m",
    ChatColor.YELLOW: "\033[0;93m",
    ChatColor.WHITE: "\033[0;97m",
    ChatColor.MAGIC: "\033[5m",
    ChatColor.BOLD: "\033[1m",
    ChatColor.STRIKETHROUGH: "\033[9m",
    ChatColor.UNDERLINE: "\033[4m",
    ChatColor.ITALIC: "\033[3m",
    ChatColor.RESET: "\033[0m",
}


def to_ansi(text: str) -> str:
    """Render color codes as ANSI escapes for terminal output."""
    def replace(match: "re.Match") -> str:
        color = ChatColor.get_by_char(match.group(0)[1])
        return _ANSI_CODES.get(color, "")

    rendered = _STRIP_COLOR_PATTERN.sub(replace, text)
    if rendered != text:
        rendered += _ANSI_CODES[ChatColor.RESET]
    return rendered
