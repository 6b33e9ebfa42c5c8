"""
Validator - chainable field checks with templated error accumulation.

Usage:
    validator = Validator()
    validator.set_name("age").set_value(15).not_empty().min_max(18, 65)
    validator.set_name("email").set_value("x").email()
    if validator.has_failed():
        errors = validator.get_errors()

A Validator is not thread-safe. Use one instance per validation session.
"""

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from fieldcheck.core.messages import DEFAULT_MESSAGES, render, require_complete
from fieldcheck.core.models import ValidationReport, ValidatorSettings
from fieldcheck.errors import ConfigurationError

from . import predicates
from .patterns import (
    ALPHA_RE,
    ALPHANUM_RE,
    ARRAY,
    BUILTIN_PATTERNS,
    URI_RE,
    URL_RE,
    anchor,
    full_match,
)

_default_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Validator:
    """
    Accumulates validation failures for a sequence of (name, value) pairs.

    Each check inspects the current value and, on failure, appends the
    unrendered template of its kind under the current field name. Templates
    are rendered by finalize(), which get_errors() calls on demand.

    last_length_bounds and last_range_bounds are shared by every pending
    message: rendering uses whatever bounds the most recent length() or
    min_max() call set, even for messages recorded on earlier fields.
    """

    def __init__(
        self,
        messages: Mapping[str, str] | None = None,
        *,
        debug: bool = False,
        patterns: Mapping[str, str] | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize validator.

        Args:
            messages: Complete replacement template set (None keeps defaults)
            debug: Diagnostics mode; custom_pattern() raises on mismatch
            patterns: Extra named regex fragments for match_pattern()
            logger: Logger to use instead of the module logger

        Raises:
            ConfigurationError: If messages is not a complete template mapping
        """
        if messages is None:
            self._messages = dict(DEFAULT_MESSAGES)
        else:
            self._messages = require_complete(messages)

        self._patterns = dict(BUILTIN_PATTERNS)
        for pattern_name, fragment in (patterns or {}).items():
            self.add_pattern(pattern_name, fragment)

        self.debug = debug
        self.logger = logger or _default_logger

        self._name = ""
        self._value: Any = None
        self.last_length_bounds: tuple[Any, Any] = (0, 0)
        self.last_range_bounds: tuple[Any, Any] = (0, 0)

        self._errors: dict[str, list[str]] = {}
        # (field, index) of messages not yet rendered
        self._pending: list[tuple[str, int]] = []
        self._finalized = False

    @classmethod
    def from_settings(cls, settings: ValidatorSettings, **kwargs: Any) -> "Validator":
        """Build a validator from a ValidatorSettings model."""
        return cls(
            settings.messages,
            debug=settings.debug,
            patterns=settings.patterns,
            **kwargs,
        )

    # Context

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def messages(self) -> dict[str, str]:
        return dict(self._messages)

    @property
    def patterns(self) -> dict[str, str]:
        return dict(self._patterns)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def set_name(self, name: str) -> "Validator":
        """Set the field the following checks apply to."""
        self._name = name
        return self

    def set_value(self, value: Any) -> "Validator":
        """Set the value the following checks inspect."""
        self._value = value
        return self

    def add_pattern(self, name: str, fragment: str) -> "Validator":
        """
        Register a named fragment for match_pattern().

        Raises:
            ConfigurationError: If the name is reserved or the fragment does not compile
        """
        if not name or name == ARRAY:
            raise ConfigurationError(f"Invalid pattern name: '{name}'")
        try:
            anchor(fragment)
        except re.error as e:
            raise ConfigurationError(f"Pattern '{name}' does not compile: {e}", pattern=fragment)
        self._patterns[name] = fragment
        return self

    # Checks

    def not_empty(self) -> "Validator":
        if predicates.is_empty(self._value):
            self._fail("empty")
        return self

    def no_white_space(self) -> "Validator":
        text = predicates.as_text(self._value)
        if text is not None and re.search(r"\s", text):
            self._fail("whiteSpace")
        return self

    def length(self, min_length: int, max_length: int) -> "Validator":
        """Text length must lie within [min_length, max_length]."""
        self.last_length_bounds = (min_length, max_length)

        text = predicates.as_text(self._value)
        if text is None or not min_length <= len(text) <= max_length:
            self._fail("length")
        return self

    def min_max(self, minimum: int | float, maximum: int | float) -> "Validator":
        """Numeric value must lie within [minimum, maximum]."""
        self.last_range_bounds = (minimum, maximum)

        number = predicates.as_number(self._value)
        if number is None or not minimum <= number <= maximum:
            self._fail("minMax")
        return self

    def int_(self) -> "Validator":
        if not predicates.is_int(self._value):
            self._fail("int")
        return self

    def float_(self) -> "Validator":
        if not predicates.is_float(self._value):
            self._fail("float")
        return self

    def alpha(self) -> "Validator":
        return self._check_text(ALPHA_RE, "alpha")

    def alphanum(self) -> "Validator":
        return self._check_text(ALPHANUM_RE, "alphanum")

    def url(self) -> "Validator":
        # Matches plain alphanumerics only; kept for compatibility
        return self._check_text(URL_RE, "url")

    def uri(self) -> "Validator":
        return self._check_text(URI_RE, "uri")

    def bool_(self) -> "Validator":
        # Reported with the "uri" template; kept for compatibility
        if not predicates.is_bool(self._value):
            self._fail("uri")
        return self

    def email(self) -> "Validator":
        if not predicates.is_email_address(self._value):
            self._fail("email")
        return self

    def match_pattern(self, name: str) -> "Validator":
        """
        Check the value against a named fragment.

        "array" checks for a list, tuple or mapping instead. Blank values
        (None or "") pass every named fragment.

        Raises:
            ConfigurationError: If no fragment is registered under name
        """
        if name == ARRAY:
            if not predicates.is_array(self._value):
                self._fail(ARRAY)
            return self

        fragment = self._patterns.get(name)
        if fragment is None:
            raise ConfigurationError(f"Unknown pattern: '{name}'")

        if not predicates.is_blank(self._value) and not self._matches(fragment):
            self._fail("badFormat")
        return self

    def custom_pattern(self, fragment: str) -> "Validator":
        """
        Check the value against a caller-supplied fragment.

        Only has an effect in diagnostics mode, where a non-blank value that
        does not match raises. Nothing is ever recorded as a failure.

        Raises:
            ConfigurationError: In debug mode, if a non-blank value does not match
        """
        if self.debug and not predicates.is_blank(self._value) and not self._matches(fragment):
            raise ConfigurationError(f'Custom pattern "{fragment}" is invalid.', pattern=fragment)
        return self

    # Reporting

    def finalize(self) -> "Validator":
        """Render every pending message. Calling it again is a no-op."""
        if self._finalized:
            return self

        for field, index in self._pending:
            self._errors[field][index] = render(
                self._errors[field][index],
                str(field),
                self.last_length_bounds,
                self.last_range_bounds,
            )

        self.logger.debug(
            "Rendered validation messages",
            extra={"rendered": len(self._pending), "fields": len(self._errors)},
        )
        self._pending.clear()
        self._finalized = True
        return self

    def get_errors(self, callback: Callable[[dict[str, list[str]]], T] | None = None) -> dict[str, list[str]] | T:
        """
        Return rendered errors per field, or callback(errors) if given.
        """
        self.finalize()
        errors = {field: list(messages) for field, messages in self._errors.items()}

        if callback is None:
            return errors
        return callback(errors)

    def has_failed(self) -> bool:
        return len(self._errors) != 0

    def get_first_error(self) -> str:
        if not self._errors:
            return ""
        self.finalize()
        return next(iter(self._errors.values()))[0]

    def report(self) -> ValidationReport:
        """Finalize and summarize the session as a ValidationReport."""
        errors = self.get_errors()
        return ValidationReport(
            passed=not errors,
            errors=errors,
            first_error=self.get_first_error(),
        )

    def _check_text(self, pattern: re.Pattern, kind: str) -> "Validator":
        text = predicates.as_text(self._value)
        if text is None or not full_match(pattern, text):
            self._fail(kind)
        return self

    def _matches(self, fragment: str) -> bool:
        """Whole-value match of the current value; bad fragments never match."""
        text = predicates.as_text(self._value)
        if text is None:
            return False
        try:
            return full_match(anchor(fragment), text)
        except re.error:
            return False

    def _fail(self, kind: str) -> None:
        template = self._messages.get(kind)
        if template is None:
            self.logger.warning(
                "No message template for failure kind",
                extra={"kind": kind, "field": self._name},
            )
            template = ""

        messages = self._errors.setdefault(self._name, [])
        self._pending.append((self._name, len(messages)))
        messages.append(template)
        self._finalized = False

        self.logger.debug("Check failed", extra={"kind": kind, "field": self._name})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, failed_fields={list(self._errors)})"
