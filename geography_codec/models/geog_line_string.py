"""Geography line string model."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .geog_point import GeogPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeogLineString:
    """
    Ordered sequence of points sharing one spatial reference identifier.

    The line's ``srid`` is authoritative: the wire format carries a single
    SRID per geometry, so every point's ``srid`` is rewritten to mirror it.
    """
    points: Tuple[GeogPoint, ...] = ()
    srid: Optional[int] = None

    def __post_init__(self):
        points = []
        for point in self.points:
            if point.srid is not None and point.srid != self.srid:
                logger.debug(
                    f"Point SRID {point.srid} overridden by line SRID {self.srid}"
                )
            points.append(point.with_srid(self.srid))
        object.__setattr__(self, 'points', tuple(points))

    @staticmethod
    def create(points: Iterable[GeogPoint], srid: Optional[int] = None) -> 'GeogLineString':
        """Create a geography line string."""
        return GeogLineString(points=tuple(points), srid=srid)
