"""Tests for perch.chains — filter and validator chains."""

from perch.chains import FilterChain, ValidatorChain, matches, one_of


class TestFilterChain:
    def test_applies_in_order(self) -> None:
        chain = FilterChain([str.strip, str.upper])
        assert chain.filter("  abc ") == "ABC"

    def test_attach_chains(self) -> None:
        chain = FilterChain().attach(str.lower).attach(lambda v: v.replace("-", "_"))
        assert len(chain) == 2
        assert chain.filter("Dry-Run") == "dry_run"

    def test_empty_is_identity(self) -> None:
        assert FilterChain().filter("x") == "x"


class TestValidatorChain:
    def test_collects_all_errors(self) -> None:
        chain = ValidatorChain([one_of("dev", "prod"), matches(r"^\d+$")])
        assert len(chain.validate("stage")) == 2

    def test_valid(self) -> None:
        chain = ValidatorChain().attach(one_of("dev", "prod"))
        assert chain.validate("dev") == []
        assert chain.is_valid("dev") is True
        assert chain.is_valid("qa") is False


class TestRules:
    def test_matches(self) -> None:
        assert matches(r"^\d+$")("42") is None
        assert matches(r"^\d+$")("x") == "Must match pattern: ^\\d+$"

    def test_matches_custom_message(self) -> None:
        assert matches(r"^\d+$", "Digits only")("x") == "Digits only"

    def test_one_of(self) -> None:
        assert one_of("b", "a")("a") is None
        assert one_of("b", "a")("c") == "Must be one of: a, b"
