import re

_ILLEGAL_CHARS_RE = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE_RE = re.compile(r"\s+")

# Boilerplate that tends to follow a name on the same line.
STOP_WORDS: tuple[str, ...] = (
    "fattura",
    "data",
    "del",
    "competenza",
    "codice",
    "p.iva",
    "partita",
    "email",
    "telefono",
    "indirizzo",
    "via",
    "pagina",
)

_STOP_WORD_RE = re.compile(
    r" (?:" + "|".join(re.escape(word) for word in STOP_WORDS) + r")(?![^\W\d_])",
    re.IGNORECASE,
)
_NUMERIC_ONLY_RE = re.compile(r"[\d\s/.\-]+")

MIN_NAME_LENGTH = 4


def strip_illegal_chars(value: str) -> str:
    """Drop characters that are illegal in Windows/macOS filenames, squeeze spaces."""
    value = _ILLEGAL_CHARS_RE.sub("", value)
    return _WHITESPACE_RE.sub(" ", value).strip()


def sanitize_candidate(raw: str) -> str | None:
    """Turn a captured span into a display name, or None if it is not one."""
    candidate = strip_illegal_chars(raw)

    stop = _STOP_WORD_RE.search(candidate)
    if stop:
        candidate = candidate[: stop.start()].strip()

    if len(candidate) < MIN_NAME_LENGTH:
        return None
    # "25/02050", "12.345" and the like are reference numbers, not names.
    if _NUMERIC_ONLY_RE.fullmatch(candidate):
        return None
    return candidate
