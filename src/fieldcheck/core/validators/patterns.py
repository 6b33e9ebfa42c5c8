"""
Regex fragments used by the pattern checks.

Named fragments are anchored as ``^(fragment)$`` before matching. Letter
classes use ``[^\\W\\d_]`` (any Unicode letter) since ``re`` has no ``\\p{L}``.
Digits are ASCII ``0-9`` only.
"""

import re
from re import Pattern

# Named fragments available to Validator.match_pattern()
BUILTIN_PATTERNS: dict[str, str] = {
    "words": r"(?:[^\W\d_]|\s)+",
    "tel": r"[0-9+\s()-]+",
    "filename": r"(?:[^\W\d_]|[\s0-9\-_!%&()=\[\]#@,.;+])+\.[A-Za-z0-9]{2,4}",
    "folder": r"(?:[^\W\d_]|[\s0-9\-_!%&()=\[\]#@,.;+])+",
    "address": r"(?:[^\W\d_]|[0-9\s.,()°-])+",
}

# Reserved name: checks container type instead of a regex
ARRAY = "array"

ALPHA_RE = re.compile(r"[a-zA-Z]+")
ALPHANUM_RE = re.compile(r"[a-zA-Z0-9]+")
# Same as ALPHANUM_RE; url() never checked for a real URL
URL_RE = re.compile(r"[a-zA-Z0-9]+")
URI_RE = re.compile(r"[A-Za-z0-9\-/_]+")

_EMAIL_RE = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
)


def anchor(fragment: str) -> Pattern:
    """
    Compile a fragment as a whole-value match.

    Raises:
        re.error: If the fragment is not a valid regular expression
    """
    return re.compile(f"^({fragment})$", re.UNICODE)


def full_match(pattern: Pattern, text: str) -> bool:
    return pattern.fullmatch(text) is not None


def is_email(text: str) -> bool:
    if len(text) > 254 or "@" not in text:
        return False
    local, _, _ = text.rpartition("@")
    if len(local) > 64:
        return False
    return _EMAIL_RE.fullmatch(text) is not None
