"""Tests for perch.routing.route — ConsoleRoute, RouteMatch, Part."""

import re

import pytest

from perch.chains import FilterChain, ValidatorChain, one_of
from perch.config import RouteOptions
from perch.errors import ConfigurationError, GrammarSyntaxError
from perch.request import ConsoleRequest
from perch.routing.part import Part, RouteMatch
from perch.routing.route import ConsoleRoute


class TestPart:
    def test_defaults(self) -> None:
        part = Part(name="file", positional=True)
        assert part.required is True
        assert part.literal is False
        assert part.has_value is False
        assert part.alternatives is None
        assert part.named is False

    def test_frozen(self) -> None:
        part = Part(name="file", positional=True)
        with pytest.raises(AttributeError):
            part.name = "other"  # type: ignore[misc]


class TestConsoleRoute:
    def test_compiles_on_construction(self) -> None:
        route = ConsoleRoute("foo <bar>")
        assert [p.name for p in route.parts] == ["foo", "bar"]

    def test_bad_definition_raises(self) -> None:
        with pytest.raises(GrammarSyntaxError):
            ConsoleRoute("foo {bar}")

    def test_match_request(self) -> None:
        route = ConsoleRoute("foo <bar>")
        match = route.match(ConsoleRequest(params=("foo", "baz")))
        assert isinstance(match, RouteMatch)
        assert match.route is route
        assert match.params == {"foo": True, "bar": "baz"}
        assert match.get("bar") == "baz"
        assert match.get("missing", "x") == "x"

    def test_match_non_console_request(self) -> None:
        route = ConsoleRoute("foo")
        assert route.match(["foo"]) is None
        assert route.match(object()) is None

    def test_no_match_is_none(self) -> None:
        assert ConsoleRoute("foo <bar>").match_tokens(["foo"]) is None

    def test_constraints_compiled(self) -> None:
        route = ConsoleRoute("<name>", constraints={"name": r"^[a-z]+$"})
        assert isinstance(route.constraints["name"], re.Pattern)
        assert route.match_tokens(["123"]) is None
        assert route.match_tokens(["abc"]) is not None

    def test_invalid_constraint(self) -> None:
        with pytest.raises(ConfigurationError, match="name"):
            ConsoleRoute("<name>", constraints={"name": "("})

    def test_defaults_merged(self) -> None:
        route = ConsoleRoute("[--verbose] <file>", defaults={"verbose": False})
        match = route.match_tokens(["a.txt"])
        assert match is not None
        assert match.params == {"verbose": False, "file": "a.txt"}

    def test_aliases(self) -> None:
        route = ConsoleRoute("[--verbose]", aliases={"v": "verbose"})
        match = route.match_tokens(["-v"])
        assert match is not None
        assert match.params == {"verbose": True}

    def test_options_read_only(self) -> None:
        route = ConsoleRoute("<file>", defaults={"file": "x"})
        with pytest.raises(TypeError):
            route.defaults["file"] = "y"  # type: ignore[index]

    def test_repr(self) -> None:
        assert repr(ConsoleRoute("foo")) == "ConsoleRoute('foo')"


class TestChains:
    def test_none(self) -> None:
        route = ConsoleRoute("foo")
        assert route.filters is None
        assert route.validators is None

    def test_chain_objects_kept(self) -> None:
        filters = FilterChain([str.strip])
        validators = ValidatorChain([one_of("a")])
        route = ConsoleRoute("foo", filters=filters, validators=validators)
        assert route.filters is filters
        assert route.validators is validators

    def test_iterables_wrapped(self) -> None:
        route = ConsoleRoute("foo", filters=[str.strip, str.lower], validators=(one_of("a"),))
        assert isinstance(route.filters, FilterChain)
        assert len(route.filters) == 2
        assert isinstance(route.validators, ValidatorChain)
        assert len(route.validators) == 1

    def test_mappings_wrapped(self) -> None:
        route = ConsoleRoute(
            "foo",
            filters={"filters": [str.upper]},
            validators={"validators": [one_of("A")]},
        )
        assert route.filters is not None
        assert route.filters.filter("a") == "A"
        assert route.validators is not None
        assert route.validators.is_valid("A")

    @pytest.mark.parametrize("filters", [42, "strip", {"other": []}])
    def test_bad_filters(self, filters: object) -> None:
        with pytest.raises(ConfigurationError, match="filters"):
            ConsoleRoute("foo", filters=filters)

    @pytest.mark.parametrize("validators", [3.5, b"x", [1]])
    def test_bad_validators(self, validators: object) -> None:
        with pytest.raises(ConfigurationError, match="validators"):
            ConsoleRoute("foo", validators=validators)


class TestFactory:
    def test_from_mapping(self) -> None:
        route = ConsoleRoute.factory(
            {"route": "<name>", "constraints": {"name": r"^\w+$"}, "defaults": {"x": "1"}}
        )
        match = route.match_tokens(["bob"])
        assert match is not None
        assert match.params == {"x": "1", "name": "bob"}

    def test_from_options(self) -> None:
        route = ConsoleRoute.factory(RouteOptions(route="foo", aliases={"f": "foo"}))
        assert route.aliases == {"f": "foo"}

    def test_missing_route(self) -> None:
        with pytest.raises(ConfigurationError, match="route"):
            ConsoleRoute.factory({"defaults": {}})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            ConsoleRoute.factory(["foo"])  # type: ignore[arg-type]


class TestAssemble:
    def test_assemble_resets(self) -> None:
        route = ConsoleRoute("foo <bar>")
        assert route.assemble({"bar": "baz"}, {"name": "x"}) is None
        assert route.get_assembled_params() == {}

    def test_assemble_idempotent(self) -> None:
        route = ConsoleRoute("foo")
        route.assemble()
        route.assemble()
        assert route.get_assembled_params() == {}
