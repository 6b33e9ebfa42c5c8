"""
Unit tests for message templates and the YAML message catalog.
"""

import io

import pytest
import yaml

from fieldcheck.core.messages import (
    DEFAULT_MESSAGES,
    PLACEHOLDERS,
    capitalize_first,
    format_bound,
    load_messages,
    missing_kinds,
    render,
    require_complete,
)
from fieldcheck.errors import ConfigurationError

pytestmark = pytest.mark.unit


class TestDefaults:
    """Tests for the default template set"""

    def test_known_kinds(self):
        assert list(DEFAULT_MESSAGES) == [
            "empty", "badFormat", "length", "minMax", "int", "float", "alpha",
            "alphanum", "whiteSpace", "url", "uri", "bool", "email",
        ]

    def test_no_array_kind(self):
        assert "array" not in DEFAULT_MESSAGES

    def test_every_template_names_the_field(self):
        for template in DEFAULT_MESSAGES.values():
            assert "{{field}}" in template


class TestRequireComplete:
    """Tests for completeness checks on override sets"""

    def test_complete_set_is_copied(self, german_messages):
        result = require_complete(german_messages)

        assert result == german_messages
        assert result is not german_messages

    def test_missing_kinds_in_default_order(self):
        assert missing_kinds({"email": "", "empty": ""})[:3] == ["badFormat", "length", "minMax"]

    def test_missing_keys_error(self):
        messages = dict(DEFAULT_MESSAGES)
        del messages["int"]

        with pytest.raises(ConfigurationError) as exc_info:
            require_complete(messages)

        assert str(exc_info.value) == "Message templates have missing keys: int"

    def test_non_mapping_error(self):
        with pytest.raises(ConfigurationError):
            require_complete("empty")


class TestRender:
    """Tests for placeholder substitution"""

    def test_all_placeholders(self):
        template = " ".join(PLACEHOLDERS)

        assert render(template, "age", (1, 2), (3, 4)) == "Age 1 2 3 4"

    def test_rendered_text_is_stable(self):
        once = render(DEFAULT_MESSAGES["length"], "code", (2, 4), (0, 0))

        assert render(once, "code", (9, 9), (9, 9)) == once

    def test_capitalize_first_keeps_rest(self):
        assert capitalize_first("firstName") == "FirstName"
        assert capitalize_first("") == ""

    @pytest.mark.parametrize("bound,expected", [(18, "18"), (2.0, "2"), (2.5, "2.5"), (-1, "-1")])
    def test_format_bound(self, bound, expected):
        assert format_bound(bound) == expected


class TestLoadMessages:
    """Tests for YAML message catalogs"""

    def test_load_from_text(self, german_messages):
        document = yaml.safe_dump({"messages": german_messages}, allow_unicode=True)

        assert load_messages(document) == german_messages

    def test_load_from_stream(self, german_messages):
        stream = io.StringIO(yaml.safe_dump({"messages": german_messages}))

        assert load_messages(stream) == german_messages

    def test_missing_section(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_messages("templates:\n  empty: x\n")

        assert "'messages'" in str(exc_info.value)

    def test_incomplete_catalog(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_messages("messages:\n  empty: '{{field}} is empty'\n")

        assert "int" in exc_info.value.missing_keys

    def test_invalid_yaml(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_messages("messages: [unclosed")

        assert "Invalid message catalog" in str(exc_info.value)

    def test_non_string_template(self, german_messages):
        german_messages["int"] = 42
        document = yaml.safe_dump({"messages": german_messages})

        with pytest.raises(ConfigurationError):
            load_messages(document)

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            load_messages("messages:\n  - empty\n")
