"""Parse request paths of the form /<operation>/<number>/<number>."""
from typing import List, Optional, Tuple


DIGITS = frozenset("0123456789")
EXPONENT_MARKERS = frozenset("eE")
EXPONENT_SIGNS = frozenset("+-")

# (operation name, first operand text, second operand text)
RouteMatch = Tuple[str, str, str]


class PathParser:
    """
    Match request paths against the arithmetic route.

    Design constraints:
        - No regular expressions, only a small hand-written scanner
        - Anchored at both ends: no trailing slash, no extra or empty segment

    Grammar:
        path   = "/" name "/" number "/" number
        name   = one or more ASCII letters
        number = ["-"] ("0" | nonzero-digit {digit}) ["." digit {digit}] [("e" | "E") ["+" | "-"] digit {digit}]

    Examples:
        - "/plus/2/3" matches as ("plus", "2", "3")
        - "/mul/-1.5e3/0" matches as ("mul", "-1.5e3", "0")
        - "/plus/01/2", "/plus/1/2/" and "/plus/+1/2" do not match
    """

    @staticmethod
    def tokenize(path: str) -> Optional[List[str]]:
        """
        Split an absolute path into its segments.

        :param str path: Request path, e.g. "/plus/2/3"

        :return: Segments after the leading slash, or None if the path is not absolute
        :rtype: Optional[List[str]]
        """
        if not path.startswith("/"):
            return None
        return path[1:].split("/")

    @staticmethod
    def _is_name(token: str) -> bool:
        """
        Determine if a token is a valid operation name (ASCII letters only).

        :param str token: Path segment

        :return: True if the token is a non-empty run of ASCII letters
        :rtype: bool
        """
        return token.isascii() and token.isalpha()

    @staticmethod
    def _scan_digits(token: str, index: int) -> int:
        """Return the index of the first non-digit character at or after index."""
        while index < len(token) and token[index] in DIGITS:
            index += 1
        return index

    @staticmethod
    def is_number(token: str) -> bool:
        """
        Determine if a token is a JSON number literal.

        :param str token: Path segment

        :return: True if the whole token follows the JSON number grammar
        :rtype: bool
        """
        index = 0
        if token.startswith("-"):
            index = 1

        # Integer part: a lone zero, or digits without a leading zero
        end = PathParser._scan_digits(token, index)
        if end == index:
            return False
        if token[index] == "0" and end - index > 1:
            return False
        index = end

        # Optional fraction, at least one digit after the dot
        if index < len(token) and token[index] == ".":
            end = PathParser._scan_digits(token, index + 1)
            if end == index + 1:
                return False
            index = end

        # Optional exponent, optionally signed, at least one digit
        if index < len(token) and token[index] in EXPONENT_MARKERS:
            index += 1
            if index < len(token) and token[index] in EXPONENT_SIGNS:
                index += 1
            end = PathParser._scan_digits(token, index)
            if end == index:
                return False
            index = end

        return index == len(token)

    @staticmethod
    def match(path: str) -> Optional[RouteMatch]:
        """
        Match a path against the arithmetic route.

        :param str path: Request path without query string

        :return: (operation name, first operand, second operand) or None if the path does not match
        :rtype: Optional[RouteMatch]
        """
        segments = PathParser.tokenize(path)
        if segments is None or len(segments) != 3:
            return None

        name, first, second = segments
        if not PathParser._is_name(name):
            return None
        if not (PathParser.is_number(first) and PathParser.is_number(second)):
            return None
        return name, first, second
