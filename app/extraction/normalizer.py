import re

_HORIZONTAL_SPACE_RE = re.compile(r"[^\S\n]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def normalize_text(raw: str) -> str:
    """Make extracted PDF text predictable for line-oriented regexes.

    Carriage returns become newlines, horizontal whitespace runs become one
    space, three or more newlines become two, and the ends are trimmed.
    """
    text = raw.replace("\r", "\n")
    text = _HORIZONTAL_SPACE_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
