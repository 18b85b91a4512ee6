import re

# e.g. "25-02050": two digits, a hyphen, four or more digits.
GROUP_KEY_RE = re.compile(r"[0-9]{2}-[0-9]{4,}")


def extract_group_key(filename: str) -> str | None:
    """Return the first group key found in *filename*, or None."""
    match = GROUP_KEY_RE.search(filename)
    return match.group(0) if match else None
