"""Tests for perch.config — RouteOptions frozen dataclass."""

import pytest

from perch.config import RouteOptions
from perch.errors import ConfigurationError


class TestRouteOptions:
    def test_defaults(self) -> None:
        opts = RouteOptions(route="foo")

        assert opts.route == "foo"
        assert opts.constraints == {}
        assert opts.defaults == {}
        assert opts.aliases == {}
        assert opts.filters is None
        assert opts.validators is None

    def test_frozen(self) -> None:
        opts = RouteOptions(route="foo")

        with pytest.raises(AttributeError):
            opts.route = "bar"  # type: ignore[misc]


class TestFromMapping:
    def test_fills_missing_keys(self) -> None:
        opts = RouteOptions.from_mapping({"route": "foo <bar>"})

        assert opts.route == "foo <bar>"
        assert opts.constraints == {}
        assert opts.filters is None

    def test_none_values_become_empty(self) -> None:
        opts = RouteOptions.from_mapping({"route": "foo", "defaults": None})

        assert opts.defaults == {}

    def test_passes_through(self) -> None:
        filters = [str.strip]
        opts = RouteOptions.from_mapping(
            {"route": "foo", "aliases": {"f": "foo"}, "filters": filters}
        )

        assert opts.aliases == {"f": "foo"}
        assert opts.filters is filters

    def test_missing_route(self) -> None:
        with pytest.raises(ConfigurationError, match='Missing "route"'):
            RouteOptions.from_mapping({})

    @pytest.mark.parametrize("options", ["foo", ["route"], None])
    def test_not_a_mapping(self, options: object) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            RouteOptions.from_mapping(options)
