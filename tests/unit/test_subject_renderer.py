"""Unit tests for the subject renderer.

Tests token building, ordered substitution and service type rendering.

Version: 1.0.0
"""

from __future__ import annotations

import pytest

from collection_notifier.models.email import SubjectTemplate
from collection_notifier.models.service import ServiceEvent, ServiceType
from collection_notifier.templates.renderer import (
    SERVICE_TYPE_TOKEN,
    SubjectRenderer,
    build_token,
    replace_tokens,
)


class TestBuildToken:
    """Tests for token delimiters."""

    def test_build_token(self):
        """Test token names are wrapped in double angle brackets."""
        assert build_token("serviceType") == "<<serviceType>>"


class TestReplaceTokens:
    """Tests for replace_tokens."""

    def test_basic_substitution(self):
        """Test a single token is replaced."""
        result = replace_tokens(
            [("serviceType", "Refuse")], "Collection reminder: <<serviceType>>"
        )

        assert result == "Collection reminder: Refuse"

    def test_every_occurrence_replaced(self):
        """Test all occurrences of a token are replaced."""
        result = replace_tokens([("x", "1")], "<<x>>-<<x>>-<<x>>")

        assert result == "1-1-1"

    def test_no_tokens_is_identity(self):
        """Test template without tokens is returned unchanged."""
        result = replace_tokens(
            [("serviceType", "Refuse"), ("other", "value")], "Static subject"
        )

        assert result == "Static subject"

    def test_empty_pairs_is_identity(self):
        """Test no substitutions leaves template unchanged."""
        assert replace_tokens([], "Hello <<serviceType>>") == "Hello <<serviceType>>"

    def test_unmatched_token_left_verbatim(self):
        """Test tokens without a replacement stay in the output."""
        result = replace_tokens([("serviceType", "Refuse")], "Hello <<unknown>>")

        assert result == "Hello <<unknown>>"

    def test_partial_delimiters_not_replaced(self):
        """Test only the fully delimited form is replaced."""
        result = replace_tokens(
            [("serviceType", "Refuse")], "serviceType <serviceType> <<serviceType>"
        )

        assert result == "serviceType <serviceType> <<serviceType>"

    def test_no_escaping(self):
        """Test replacement values are inserted as-is."""
        result = replace_tokens([("t", "<b>&</b>")], "<<t>>")

        assert result == "<b>&</b>"

    def test_later_pair_sees_earlier_replacement(self):
        """Test a value holding a later token is substituted by that later pair."""
        result = replace_tokens([("a", "<<b>>"), ("b", "B")], "<<a>>")

        assert result == "B"

    def test_earlier_pair_not_reapplied(self):
        """Test substitution is a single pass over the pairs."""
        result = replace_tokens([("b", "B"), ("a", "<<b>>")], "<<a>>")

        assert result == "<<b>>"

    def test_self_referencing_value_terminates(self):
        """Test a value containing its own token is not expanded repeatedly."""
        result = replace_tokens([("a", "<<a>>!")], "<<a>>")

        assert result == "<<a>>!"


class TestSubjectRenderer:
    """Tests for SubjectRenderer."""

    @pytest.mark.parametrize("service_type,expected", [
        (ServiceType.REFUSE, "Collection reminder: Refuse"),
        (ServiceType.RECYCLING, "Collection reminder: Recycling"),
    ])
    def test_render_service_types(self, service_type, expected):
        """Test each service type renders as a capitalised word."""
        renderer = SubjectRenderer(
            SubjectTemplate(text="Collection reminder: <<serviceType>>")
        )

        assert renderer.render(ServiceEvent(service_type=service_type)) == expected

    def test_render_static_subject(self):
        """Test a template without tokens is sent unchanged."""
        renderer = SubjectRenderer(SubjectTemplate(text="Static subject"))

        result = renderer.render(ServiceEvent(service_type=ServiceType.REFUSE))

        assert result == "Static subject"

    def test_render_leaves_unknown_tokens(self):
        """Test unknown tokens survive rendering."""
        renderer = SubjectRenderer(
            SubjectTemplate(text="<<serviceType>> on <<collectionDate>>")
        )

        result = renderer.render(ServiceEvent(service_type=ServiceType.RECYCLING))

        assert result == "Recycling on <<collectionDate>>"

    def test_service_type_token_name(self):
        """Test the token filled in by the renderer."""
        assert SERVICE_TYPE_TOKEN == "serviceType"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
