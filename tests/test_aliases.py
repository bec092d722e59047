"""Unit tests for alias resolution."""

from director_benefits.normalization.aliases import (
    MISSING,
    NAME_ALIASES,
    SALARY_ALIASES,
    FieldAliases,
    first_match,
    first_present,
    is_truthy,
    lowercase_keys,
    resolve_alias,
    resolve_or_default,
)


class TestResolveAlias:
    """Tests for resolve_alias() and resolve_or_default()."""

    def test_exact_alias_priority_order(self):
        """The earliest alias in the list wins when several are present."""
        record = {"employeeName": "C", "fullName": "B", "directorName": "D"}
        assert resolve_alias(record, NAME_ALIASES) == "B"

    def test_falsy_exact_value_is_skipped(self):
        """Empty values do not resolve; the next alias is tried."""
        record = {"name": "", "fullName": "Jane Doe"}
        assert resolve_alias(record, NAME_ALIASES) == "Jane Doe"

    def test_empty_container_value_resolves(self):
        """An empty list still counts as a present value for its alias."""
        record = {"name": [], "fullName": "Jane Doe"}
        assert resolve_alias(record, NAME_ALIASES) == []

    def test_case_insensitive_fallback(self):
        """Keys with unexpected casing resolve through the lower-cased map."""
        record = {"Employee Name": "Jane Doe"}
        assert resolve_alias(record, NAME_ALIASES) == "Jane Doe"

    def test_exact_alias_beats_case_insensitive_match(self):
        record = {"NAME": "Upper", "fullName": "Exact"}
        assert resolve_alias(record, NAME_ALIASES) == "Exact"

    def test_lowered_aliases_only_match_listed_keys(self):
        """'employmentIncome' is an exact alias only, so 'EMPLOYMENTINCOME' does not match."""
        record = {"EMPLOYMENTINCOME": 1000}
        assert resolve_alias(record, SALARY_ALIASES) is MISSING

    def test_unresolved_returns_missing(self):
        assert resolve_alias({"unrelated": 1}, NAME_ALIASES) is MISSING

    def test_resolve_or_default(self):
        assert resolve_or_default({}, NAME_ALIASES, "fallback") == "fallback"
        assert resolve_or_default({"name": "X"}, NAME_ALIASES, "fallback") == "X"

    def test_precomputed_lowered_map_is_used(self):
        aliases = FieldAliases(exact=(), lowered=("title",))
        record = {"Title": "ignored"}
        assert resolve_alias(record, aliases, lowered={"title": "from map"}) == "from map"


class TestHelpers:
    """Tests for the combinator helpers."""

    def test_first_match_short_circuits(self):
        calls = []

        def strategy(value):
            def run():
                calls.append(value)
                return value
            return run

        assert first_match(strategy(MISSING), strategy("hit"), strategy("never")) == "hit"
        assert calls == [MISSING, "hit"]

    def test_first_match_all_missing(self):
        assert first_match(lambda: MISSING) is MISSING

    def test_first_present_accepts_falsy_values(self):
        """Zero counts as present; None does not."""
        record = {"a": None, "b": 0, "c": 5}
        assert first_present(record, ("a", "b", "c")) == 0

    def test_first_present_missing(self):
        assert first_present({"a": None}, ("a", "b")) is MISSING

    def test_is_truthy(self):
        assert is_truthy("x")
        assert is_truthy(1)
        assert not is_truthy("")
        assert not is_truthy(0)
        assert not is_truthy(None)
        assert not is_truthy(float("nan"))

    def test_containers_are_truthy_even_when_empty(self):
        assert is_truthy([])
        assert is_truthy({})
        assert is_truthy(())

    def test_lowercase_keys_last_key_wins(self):
        assert lowercase_keys({"Name": "a", "NAME": "b"}) == {"name": "b"}
