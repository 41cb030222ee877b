"""Tests for the objective sense registry.

- Test behavior, not implementation
- Each test should fail for one reason
- Assert both exception type and message fragment for error tests
"""

import pytest

from arb_ea import Dominance, Reverse, compare
from arb_ea.registry import SenseRegistry, list_senses


@pytest.fixture(autouse=True)
def isolate_registry():
    """Save and restore the registry to ensure test isolation."""
    saved = SenseRegistry._registry.copy()
    yield
    SenseRegistry._registry = saved


class TestBuiltinSenses:
    """Tests for the senses registered on import."""

    def test_builtins_listed(self) -> None:
        """min and max are available out of the box."""
        assert list_senses() == ["max", "min"]

    def test_min_keeps_value(self) -> None:
        """min returns the value itself."""
        value = (1, 2)
        assert SenseRegistry.get("min")(value) is value

    def test_max_is_reverse(self) -> None:
        """max wraps the value in Reverse."""
        assert SenseRegistry.get("max") is Reverse

    def test_max_flips_comparison(self) -> None:
        """A maximized measurement compares reversed."""
        maximize = SenseRegistry.get("max")
        assert compare(maximize((1, 2)), maximize((2, 3))) is Dominance.GREATER


class TestSenseRegistry:
    """Tests for registering and retrieving senses."""

    def test_register_adds_sense(self) -> None:
        """Registering adds the name to the listing."""
        SenseRegistry.register("rounded", round)
        assert "rounded" in SenseRegistry.list()

    def test_register_overwrites_existing_sense(self) -> None:
        """Registering with the same name replaces the wrapper."""
        SenseRegistry.register("min", abs)
        assert SenseRegistry.get("min") is abs
        assert list_senses().count("min") == 1

    def test_registered_sense_is_used(self) -> None:
        """A custom wrapper takes part in comparisons."""
        SenseRegistry.register("rounded", round)
        wrap = SenseRegistry.get("rounded")
        assert compare((wrap(1.2), 3), (wrap(0.9), 4)) is Dominance.LESS

    def test_get_unknown_raises(self) -> None:
        """Unknown names raise KeyError listing available senses."""
        with pytest.raises(KeyError, match="Objective sense 'best' not found"):
            SenseRegistry.get("best")

    def test_get_on_empty_registry(self) -> None:
        """The error message says so when nothing is registered."""
        SenseRegistry._registry = {}
        with pytest.raises(KeyError, match="Available senses: none"):
            SenseRegistry.get("min")

    def test_list_is_sorted(self) -> None:
        """Listing is alphabetical."""
        SenseRegistry.register("a_first", abs)
        assert list_senses() == sorted(list_senses())
        assert list_senses()[0] == "a_first"
