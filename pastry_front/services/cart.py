"""Cart state: pastry id to requested quantity"""

from collections.abc import Mapping
from typing import Iterator


class Cart(Mapping):
    """
    Client-held cart.

    ``set_quantity`` is the only mutation; increment and decrement
    are expressed through it. Absent lines read as quantity 0 and
    negative quantities clamp to 0. Keys are stored as text, so
    ``1`` and ``"1"`` address the same line.
    """

    def __init__(self):
        self._lines: dict[str, int] = {}

    def quantity(self, pastry_id: str) -> int:
        """Current quantity, 0 when absent"""
        return self._lines.get(str(pastry_id), 0)

    def set_quantity(self, pastry_id: str, quantity: int) -> int:
        """Set a line to max(0, quantity) and return the stored value"""
        stored = max(0, int(quantity))
        self._lines[str(pastry_id)] = stored
        return stored

    def increment(self, pastry_id: str) -> int:
        return self.set_quantity(pastry_id, self.quantity(pastry_id) + 1)

    def decrement(self, pastry_id: str) -> int:
        return self.set_quantity(pastry_id, self.quantity(pastry_id) - 1)

    def selected(self) -> dict[str, int]:
        """Lines with quantity > 0"""
        return {pastry_id: qty for pastry_id, qty in self._lines.items() if qty > 0}

    def clear(self) -> None:
        self._lines = {}

    def is_empty(self) -> bool:
        return not self.selected()

    def to_dict(self) -> dict[str, int]:
        return dict(self._lines)

    def __getitem__(self, pastry_id: str) -> int:
        return self._lines[str(pastry_id)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
