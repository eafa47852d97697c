"""String helpers used by the request parser."""


def split_char(s: str, delimiter: str, splits: int = -1, skips: int = 0) -> list[str]:
    """Split ``s`` on a single character.

    ``splits`` caps the number of splits (-1 means unlimited). ``skips`` is the
    number of leading delimiters to skip; the text before each skipped
    delimiter is dropped.
    """
    tokens: list[str] = []
    start = 0
    for index, char in enumerate(s):
        if splits == 0:
            break
        if char != delimiter:
            continue
        if skips > 0:
            start = index + 1
            skips -= 1
            continue
        tokens.append(s[start:index])
        start = index + 1
        splits -= 1
    tokens.append(s[start:])
    return tokens


def split_str(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on every occurrence of ``delimiter``.

    Raises ValueError for an empty delimiter.
    """
    return s.split(delimiter)


def trim(s: str) -> str:
    """Strip spaces from both ends of ``s``, moving both ends inwards together."""
    left, right = 0, len(s) - 1
    while left < right and (s[left] == " " or s[right] == " "):
        if s[left] == " ":
            left += 1
        if s[right] == " ":
            right -= 1
    return s[left:right + 1]