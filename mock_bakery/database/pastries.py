"""Mock pastry catalog"""

import uuid
from typing import Optional

from ..models.pastry import Pastry

# Catalog the mock bakery starts with
PASTRIES: dict[str, Pastry] = {
    "pst-001": Pastry(
        id="pst-001",
        name="Butter Croissant",
        description="Laminated dough, 27 layers, baked every morning.",
        price=3.50,
    ),
    "pst-002": Pastry(
        id="pst-002",
        name="Pain au Chocolat",
        description="Croissant dough rolled around two dark chocolate batons.",
        price=4.00,
    ),
    "pst-003": Pastry(
        id="pst-003",
        name="Cinnamon Roll",
        description="Brioche swirl with cinnamon sugar and cream cheese glaze.",
        price=4.25,
    ),
    "pst-004": Pastry(
        id="pst-004",
        name="Almond Financier",
        description=None,
        price=2.00,
    ),
    "pst-005": Pastry(
        id="pst-005",
        name="Seasonal Fruit Tart",
        description="Vanilla custard and whatever the market had that week.",
        price=5.75,
        active=False,
    ),
}


class PastryDatabase:
    """In-memory pastry catalog for mock bakery"""

    def __init__(self, seed: bool = True):
        self._seed = seed
        self.pastries: dict[str, Pastry] = {}
        self.reset()

    def reset(self) -> None:
        """Restore the starting catalog"""
        self.pastries = {
            pastry_id: pastry.model_copy()
            for pastry_id, pastry in PASTRIES.items()
        } if self._seed else {}

    def get_pastry(self, pastry_id: str) -> Optional[Pastry]:
        """Get a pastry by ID"""
        return self.pastries.get(pastry_id)

    def list_pastries(self) -> list[Pastry]:
        """List the whole catalog, inactive pastries included"""
        return list(self.pastries.values())

    def create_pastry(
        self,
        name: str,
        price: float,
        description: Optional[str] = None,
        active: bool = True,
    ) -> Pastry:
        """Add a pastry to the catalog"""
        pastry = Pastry(
            id=f"pst-{uuid.uuid4().hex[:8]}",
            name=name,
            description=description,
            price=price,
            active=active,
        )
        self.pastries[pastry.id] = pastry
        return pastry


# Singleton instance
pastry_db = PastryDatabase()
