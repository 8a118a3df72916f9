"""Component Inventory.

Counts of the item components the player currently holds.
"""

from dataclasses import dataclass

from tft_notebook.data.models import Item
from tft_notebook.errors import UnknownComponentError


@dataclass
class ComponentState:
    """A component and how many the player owns."""

    item: Item
    count: int = 0

    @property
    def api_name(self) -> str:
        return self.item.api_name

    def __repr__(self) -> str:
        return f"ComponentState({self.item.name} x{self.count})"


class ComponentInventory:
    """
    Owned component counts, one entry per discovered component.

    Counts never drop below zero.
    """

    def __init__(self, components: list[Item]):
        self._states: dict[str, ComponentState] = {}
        for component in components:
            self._states.setdefault(component.api_name, ComponentState(item=component))

    @property
    def states(self) -> list[ComponentState]:
        return list(self._states.values())

    def get(self, api_name: str) -> ComponentState:
        try:
            return self._states[api_name]
        except KeyError:
            raise UnknownComponentError(api_name) from None

    def count(self, api_name: str) -> int:
        return self.get(api_name).count

    def increment(self, api_name: str) -> int:
        """Add one of a component. Returns the new count."""
        state = self.get(api_name)
        state.count += 1
        return state.count

    def decrement(self, api_name: str) -> int:
        """Remove one of a component, stopping at zero. Returns the new count."""
        state = self.get(api_name)
        if state.count > 0:
            state.count -= 1
        return state.count

    def adjust(self, api_name: str, delta: int) -> int:
        """
        Apply a +1/-1 adjustment.

        Raises:
            ValueError: If delta is not +1 or -1.
        """
        if delta == 1:
            return self.increment(api_name)
        if delta == -1:
            return self.decrement(api_name)
        raise ValueError(f"Component adjustments must be +1 or -1, got {delta}")

    def counts(self) -> dict[str, int]:
        """Mapping of component api name to owned count."""
        return {api_name: state.count for api_name, state in self._states.items()}

    def reset(self) -> None:
        for state in self._states.values():
            state.count = 0

    def __contains__(self, api_name: object) -> bool:
        return api_name in self._states

    def __len__(self) -> int:
        return len(self._states)
