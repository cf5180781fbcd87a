"""Geography point model."""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class GeogPoint:
    """2D geography point with an optional spatial reference identifier."""
    x: float  # Longitude
    y: float  # Latitude
    srid: Optional[int] = None

    @staticmethod
    def create(x: float, y: float, srid: Optional[int] = None) -> 'GeogPoint':
        """Create a geography point."""
        return GeogPoint(x=float(x), y=float(y), srid=srid)

    def with_srid(self, srid: Optional[int]) -> 'GeogPoint':
        """Return a copy carrying ``srid``."""
        if srid == self.srid:
            return self
        return replace(self, srid=srid)
