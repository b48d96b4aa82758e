"""Unit tests for shared structural checks and their precedence."""

from __future__ import annotations

import pytest

from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.grammar import (
    MESSAGE_EMPTY_TAG,
    MESSAGE_INVALID_COMMAND_FORMAT,
    CommandGrammar,
    FieldSpec,
)
from carebook.parsing.syntax import PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG

_GRAMMAR = CommandGrammar(
    usage="demo: n/NAME p/PHONE [tag/TAG]...",
    fields=(
        FieldSpec(PREFIX_NAME, required=True),
        FieldSpec(PREFIX_PHONE, required=True),
        FieldSpec(PREFIX_TAG, multiple=True),
    ),
)
_ORDERED = CommandGrammar(
    usage=_GRAMMAR.usage,
    fields=_GRAMMAR.fields,
    ordered=True,
    duplicate_message="Duplicate prefixes.",
)


def _scan_error(grammar: CommandGrammar, args: str) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        grammar.scan(args)
    return exc_info.value


@pytest.mark.unit
def test_scan_accepts_any_order_when_unordered() -> None:
    """Unordered grammars should accept required prefixes in any order."""
    argument_map = _GRAMMAR.scan(" p/999 n/Alex tag/a tag/b")

    assert argument_map.get_value(PREFIX_NAME) == "Alex"
    assert argument_map.get_all_values(PREFIX_TAG) == ["a", "b"]


@pytest.mark.unit
def test_scan_rejects_out_of_order_when_ordered() -> None:
    """Ordered grammars should reject swapped required prefixes as format errors."""
    error = _scan_error(_ORDERED, " p/999 n/Alex")

    assert error.kind == ParseErrorKind.MISSING_OR_MISORDERED_PREFIX
    assert error.message == MESSAGE_INVALID_COMMAND_FORMAT.format(usage=_ORDERED.usage)


@pytest.mark.unit
def test_scan_missing_required_uses_usage_message() -> None:
    """Missing required prefixes should report the usage text."""
    error = _scan_error(_GRAMMAR, " n/Alex")

    assert error.kind == ParseErrorKind.MISSING_OR_MISORDERED_PREFIX
    assert _GRAMMAR.usage in error.message


@pytest.mark.unit
def test_scan_lists_repeated_prefixes_by_default() -> None:
    """Default duplicate message should name every repeated prefix."""
    error = _scan_error(_GRAMMAR, " n/Alex n/Bob p/1 p/2")

    assert error.kind == ParseErrorKind.DUPLICATE_PREFIX
    assert error.message.endswith("n/ p/")


@pytest.mark.unit
def test_scan_uses_duplicate_override() -> None:
    """Grammar-specific duplicate message should replace the default."""
    error = _scan_error(_ORDERED, " n/Alex n/Bob p/1")

    assert error.message == "Duplicate prefixes."


@pytest.mark.unit
def test_scan_rejects_empty_tag() -> None:
    """An explicit empty tag should fail even if other tags are present."""
    error = _scan_error(_GRAMMAR, " n/Alex p/1 tag/ok tag/")

    assert error.kind == ParseErrorKind.EMPTY_TAG_VALUE
    assert error.message == MESSAGE_EMPTY_TAG


@pytest.mark.unit
@pytest.mark.parametrize(
    ("args", "kind"),
    [
        ("lead n/A n/B tag/", ParseErrorKind.PREAMBLE_NOT_ALLOWED),
        (" n/A n/B tag/", ParseErrorKind.MISSING_OR_MISORDERED_PREFIX),
        (" p/1 n/A n/B tag/", ParseErrorKind.DUPLICATE_PREFIX),
        (" n/A p/1 tag/", ParseErrorKind.EMPTY_TAG_VALUE),
    ],
    ids=["preamble_first", "presence_second", "duplicate_third", "empty_tag_fourth"],
)
def test_scan_reports_only_highest_priority_violation(
    args: str, kind: ParseErrorKind
) -> None:
    """Each attempt should report exactly the highest-priority violation."""
    assert _scan_error(_GRAMMAR, args).kind == kind


@pytest.mark.unit
def test_scan_allows_preamble_when_configured() -> None:
    """Index-style commands should get the preamble back untouched."""
    grammar = CommandGrammar(usage="x", allow_preamble=True)

    assert grammar.scan("  3  ").preamble == "3"
