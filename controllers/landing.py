# controllers/landing.py

from typing import List, Optional

from controllers.base import ViewController
from repositories.properties import PropertyRepository


class LandingController(ViewController):
    """Public property browse: free-text search plus an exact city filter."""

    label = "properties"
    search_fields = ("name", "city")

    def __init__(self, repository: PropertyRepository):
        super().__init__(repository)

    def cities(self) -> List[str]:
        return sorted({p["city"] for p in self.documents if p.get("city")})

    def browse(self, search: Optional[str] = None, city: Optional[str] = None) -> List[dict]:
        matches = self.set_search(search)
        if city:
            matches = [p for p in matches if p.get("city") == city]
        return matches
