"""Registry for select-and-rank strategies.

Strategies are registered as factories and retrieved by name, so experiments
can choose and configure their environmental selection from a config file.

Basic usage:
    ```python
    from nsga_select.registry import SelectorRegistry, list_selectors

    selector = SelectorRegistry.get("nsga")
    selected = selector(population, n=100, multi_objective=mo)

    # Inject a custom non-dominated sort
    selector = SelectorRegistry.get("nsga", front_producer=my_sort)

    available = list_selectors()  # ["nsga", ...]
    ```
"""

from collections.abc import Callable

from nsga_select.protocols import SelectAndRank


class SelectorRegistry:
    """Registry for select-and-rank strategy factories.

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory functions.
            Factories accept keyword arguments and return SelectAndRank
            callables.

    Example:
        ```python
        def reverse_factory():
            def selector(solutions, n, multi_objective):
                ...
            return selector

        SelectorRegistry.register("reverse", reverse_factory)
        selector = SelectorRegistry.get("reverse")
        ```
    """

    _registry: dict[str, Callable[..., SelectAndRank]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., SelectAndRank]) -> None:
        """Register a select-and-rank strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable that returns a SelectAndRank. Should accept
                keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> SelectAndRank:
        """Get a configured selector by name.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured SelectAndRank callable.

        Raises:
            KeyError: If the strategy name is not registered. Error message
                includes list of available strategies.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Selector '{name}' not found. Available selectors: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_selectors() -> list[str]:
    """List all registered select-and-rank strategies.

    Convenience function that returns SelectorRegistry.list().
    """
    return SelectorRegistry.list()
