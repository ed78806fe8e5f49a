"""Pastry catalog shared by the admin and order views"""

import logging
from typing import Optional

from ..models.catalog import Pastry
from .bakery_client import BakeryClient, BakeryAPIError

logger = logging.getLogger(__name__)


class CatalogView:
    """Last fetched pastry list plus a loading flag"""

    def __init__(self, client: BakeryClient):
        self.client = client
        self.pastries: list[Pastry] = []
        self.loading = False
        self.last_error: Optional[str] = None

    async def refresh(self) -> list[Pastry]:
        """
        Reload the catalog.

        A failed load keeps the previous list and records the error text
        in ``last_error`` until the next successful load.
        """
        self.loading = True
        try:
            self.pastries = await self.client.list_pastries()
            self.last_error = None
        except BakeryAPIError as e:
            logger.error(f"Failed to load pastries: {e.message}")
            self.last_error = e.user_message("Failed to load pastries")
        finally:
            self.loading = False
        return self.pastries

    def to_dict(self) -> dict:
        return {
            "loading": self.loading,
            "error": self.last_error,
            "pastries": [p.model_dump() for p in self.pastries],
        }
