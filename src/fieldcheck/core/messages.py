"""
Message templates for validation failures.

Templates are flat strings with ``{{placeholder}}`` markers that are only
substituted when a validator is finalized. A replacement template set must
cover every kind in DEFAULT_MESSAGES.

Expected YAML catalog format:
```yaml
messages:
  empty: "{{field}} darf nicht leer sein"
  length: "{{field}} muss zwischen {{lenMin}} und {{lenMax}} Zeichen lang sein"
  ...
```
"""

from collections.abc import Mapping
from typing import IO, Any

import yaml

from fieldcheck.errors import ConfigurationError

# Placeholders
FIELD = "{{field}}"
LEN_MIN = "{{lenMin}}"
LEN_MAX = "{{lenMax}}"
NUM_MIN = "{{numMin}}"
NUM_MAX = "{{numMax}}"

PLACEHOLDERS = (FIELD, LEN_MIN, LEN_MAX, NUM_MIN, NUM_MAX)

DEFAULT_MESSAGES: dict[str, str] = {
    "empty": "{{field}} must not be empty",
    "badFormat": "{{field}} is invalid",
    "length": "{{field}} must be between {{lenMin}} and {{lenMax}} characters long",
    "minMax": "{{field}} must be between {{numMin}} and {{numMax}}",
    "int": "{{field}} must be an integer",
    "float": "{{field}} must be a float",
    "alpha": "{{field}} must only contain letters (a-z)",
    "alphanum": "{{field}} must only contain letters (a-z) and numbers (0-9)",
    "whiteSpace": "{{field}} cannot contain spaces",
    "url": "{{field}} must be an URL",
    "uri": "{{field}} must be an URI",
    "bool": "{{field}} must be a boolean (true-false)",
    "email": "{{field}} must be a valid email",
}


def missing_kinds(messages: Mapping[str, str]) -> list[str]:
    """Return the default kinds absent from ``messages``, in default order."""
    return [kind for kind in DEFAULT_MESSAGES if kind not in messages]


def require_complete(messages: Any) -> dict[str, str]:
    """
    Check that a replacement template set covers every known kind.

    Args:
        messages: Candidate template mapping

    Returns:
        A plain dict copy of the templates

    Raises:
        ConfigurationError: If messages is not a mapping, lacks any kind or
            holds a template that is not a string
    """
    if not isinstance(messages, Mapping):
        raise ConfigurationError(
            f"Message templates must be a mapping, got {type(messages).__name__}"
        )

    missing = missing_kinds(messages)
    if missing:
        raise ConfigurationError(
            f"Message templates have missing keys: {', '.join(missing)}",
            missing_keys=missing,
        )

    for kind, template in messages.items():
        if not isinstance(template, str):
            raise ConfigurationError(f"Template for '{kind}' must be a string")

    return dict(messages)


def format_bound(bound: Any) -> str:
    """Render a bound the way it reads in a sentence (2.0 -> "2")."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def capitalize_first(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def render(
    template: str,
    field: str,
    length_bounds: tuple[Any, Any],
    range_bounds: tuple[Any, Any],
) -> str:
    """
    Substitute every placeholder in a template.

    Args:
        template: Message with {{...}} placeholders
        field: Field name (capitalized on output)
        length_bounds: (min, max) for {{lenMin}}/{{lenMax}}
        range_bounds: (min, max) for {{numMin}}/{{numMax}}

    Returns:
        The rendered message
    """
    return (
        template.replace(FIELD, capitalize_first(field))
        .replace(LEN_MIN, format_bound(length_bounds[0]))
        .replace(LEN_MAX, format_bound(length_bounds[1]))
        .replace(NUM_MIN, format_bound(range_bounds[0]))
        .replace(NUM_MAX, format_bound(range_bounds[1]))
    )


def load_messages(source: str | IO[str]) -> dict[str, str]:
    """
    Parse a YAML message catalog supplied by the caller.

    Args:
        source: YAML text or an open text stream

    Returns:
        Complete template mapping

    Raises:
        ConfigurationError: If the document is malformed or incomplete
    """
    try:
        config = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid message catalog: {e}")

    if not isinstance(config, dict) or "messages" not in config:
        raise ConfigurationError("Message catalog must contain 'messages' section")

    messages = config["messages"]
    if not isinstance(messages, dict):
        raise ConfigurationError("'messages' section must be a mapping")

    return require_complete({str(kind): template for kind, template in messages.items()})
