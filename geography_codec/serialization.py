"""
Human-readable mirror of geography values for logging and debugging.
Disabled unless serialization.enabled is set in config.json; not part of the wire format.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from config import ServerParams

from .errors import SerializationDisabledError
from .models.geog_line_string import GeogLineString
from .models.geog_point import GeogPoint


class GeogPointSchema(BaseModel):
    """Schema mirroring GeogPoint"""
    x: float = Field(..., description="Longitude")
    y: float = Field(..., description="Latitude")
    srid: Optional[int] = Field(None, description="Spatial reference identifier")

    @classmethod
    def from_value(cls, point: GeogPoint) -> 'GeogPointSchema':
        return cls(x=point.x, y=point.y, srid=point.srid)

    def to_value(self) -> GeogPoint:
        return GeogPoint(x=self.x, y=self.y, srid=self.srid)


class GeogLineStringSchema(BaseModel):
    """Schema mirroring GeogLineString"""
    points: List[GeogPointSchema] = Field(default_factory=list)
    srid: Optional[int] = Field(None, description="Spatial reference identifier")

    @classmethod
    def from_value(cls, line: GeogLineString) -> 'GeogLineStringSchema':
        return cls(
            points=[GeogPointSchema.from_value(p) for p in line.points],
            srid=line.srid,
        )

    def to_value(self) -> GeogLineString:
        return GeogLineString(points=tuple(p.to_value() for p in self.points), srid=self.srid)


_SCHEMAS = {
    GeogPoint: GeogPointSchema,
    GeogLineString: GeogLineStringSchema,
}


def _ensure_enabled(enabled: Optional[bool]) -> None:
    if enabled is None:
        enabled = ServerParams.get_bool('serialization.enabled', False)
    if not enabled:
        raise SerializationDisabledError(
            "Geography serialization is disabled; set serialization.enabled in config.json"
        )


def _schema_for(value_type: type):
    try:
        return _SCHEMAS[value_type]
    except KeyError:
        raise TypeError(f"No serialization schema for {value_type.__name__}") from None


def to_serializable(value: Union[GeogPoint, GeogLineString], enabled: Optional[bool] = None) -> Dict[str, Any]:
    """Return a plain dict mirroring the value's fields."""
    _ensure_enabled(enabled)
    return _schema_for(type(value)).from_value(value).model_dump()


def from_serializable(data: Dict[str, Any], value_type: type, enabled: Optional[bool] = None):
    """Build a value of ``value_type`` from a dict produced by to_serializable."""
    _ensure_enabled(enabled)
    return _schema_for(value_type).model_validate(data).to_value()


def dumps(value: Union[GeogPoint, GeogLineString], enabled: Optional[bool] = None) -> str:
    """Return the value as a JSON string."""
    _ensure_enabled(enabled)
    return _schema_for(type(value)).from_value(value).model_dump_json()
