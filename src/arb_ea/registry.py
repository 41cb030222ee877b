"""Registry of named objective senses.

Dominance always compares "smaller is better". Maximizing an objective means
wrapping its value in ``Reverse`` before comparison. The registry lets callers
pick that wrapper by name, so objective directions can come from a
configuration file instead of code:

    ```python
    from arb_ea.registry import SenseRegistry, list_senses

    senses = {"cost": "min", "reliability": "max"}
    wrap = SenseRegistry.get(senses["reliability"])
    fitness = (cost, wrap(reliability))

    list_senses()  # ["max", "min"]
    ```

Custom senses (e.g. a tolerance-rounding wrapper) can be registered the same
way as the built-in ones.
"""

from collections.abc import Callable
from typing import Any

from arb_ea.adapters import Reverse


class SenseRegistry:
    """Registry mapping sense names to value wrappers.

    A wrapper is a callable taking one objective value (or a whole fitness
    measurement) and returning the value to compare in its place.

    Class Attributes:
        _registry: Dictionary mapping sense names to wrapper callables.
    """

    _registry: dict[str, Callable[[Any], Any]] = {}

    @classmethod
    def register(cls, name: str, wrapper: Callable[[Any], Any]) -> None:
        """Register a sense wrapper.

        Args:
            name: Unique name for the sense. Will overwrite if already exists.
            wrapper: Callable applied to a value before comparison.
        """
        cls._registry[name] = wrapper

    @classmethod
    def get(cls, name: str) -> Callable[[Any], Any]:
        """Get the wrapper registered under name.

        Raises:
            KeyError: If the sense name is not registered. Error message
                includes list of available senses.

        Example:
            ```python
            maximize = SenseRegistry.get("max")
            compare(maximize((1, 2)), maximize((2, 3)))  # Dominance.GREATER
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Objective sense '{name}' not found. Available senses: {available}")
        return cls._registry[name]

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered sense names."""
        return sorted(cls._registry.keys())


def list_senses() -> list[str]:
    """List all registered objective senses.

    Convenience function that returns SenseRegistry.list().
    """
    return SenseRegistry.list()


def _as_is(value: Any) -> Any:
    return value


SenseRegistry.register("min", _as_is)
SenseRegistry.register("max", Reverse)
