"""Tests for value normalization and composite keys"""
from record_deduper.common.models import Delimited, KeySpecification
from record_deduper.keys.transformer import KEY_SEPARATOR, KeyTransformer


def spec(ordinal=1, **options):
    return KeySpecification(ordinal=ordinal, extraction=Delimited(field_number=ordinal), **options)


def test_alias_lookup_happens_before_case_folding(nick_names):
    rule = spec(ignore_case=True, alias=nick_names)

    assert KeyTransformer.transform_value(rule, "Bob") == "robert"
    # Lookup is case-sensitive, so BOB is only folded
    assert KeyTransformer.transform_value(rule, "BOB") == "bob"


def test_alias_lookup_happens_before_trimming(nick_names):
    rule = spec(ignore_whitespace=True, alias=nick_names)

    assert KeyTransformer.transform_value(rule, " Bob ") == "Bob"
    assert KeyTransformer.transform_value(rule, "Rob") == "Robert"


def test_whitespace_trim_keeps_internal_spaces():
    rule = spec(ignore_whitespace=True)

    assert KeyTransformer.transform_value(rule, "  Van  Dyke  ") == "Van  Dyke"


def test_values_are_untouched_without_options():
    assert KeyTransformer.transform_value(spec(), " Smith ") == " Smith "


def test_compose_appends_separator_after_each_value():
    fields = [(spec(1, ignore_case=True), "ROBERT"), (spec(2), "Smith")]

    assert KeyTransformer().compose(fields) == f"robert{KEY_SEPARATOR}Smith{KEY_SEPARATOR}"


def test_compose_of_nothing_is_empty():
    assert KeyTransformer().compose([]) == ""


def test_custom_separator():
    assert KeyTransformer(separator="\x1f").compose([(spec(), "a")]) == "a\x1f"
