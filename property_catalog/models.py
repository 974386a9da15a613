"""Property record shapes and their JSON wire format."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Union

from .config import DEFAULT_SQFT, PLACEHOLDER_IMAGE
from .exceptions import ValidationError


@dataclass(frozen=True)
class Coordinates:
    lat: float = 0.0
    lng: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Coordinates":
        if not data:
            return cls()
        return cls(lat=float(data.get("lat", 0.0)), lng=float(data.get("lng", 0.0)))

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Property:
    """A listing as stored by the backend.

    ``id`` is assigned by the backend and kept as sent: json-server hands out
    integers or short strings depending on its version. ``type`` holds the
    listing category ("House", "Plot", ...), matching the key used on the wire.
    """

    id: Union[int, str]
    name: str
    type: str
    location: str
    price: float
    description: str
    full_description: str
    sqft: float
    image: str
    coordinates: Coordinates = Coordinates()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Property":
        """Build a record from a backend JSON object.

        Raises KeyError/TypeError/ValueError for objects that are not records.
        """
        record_id = data["id"]
        if isinstance(record_id, bool) or not isinstance(record_id, (int, str)):
            raise ValueError(f"Unusable property id: {record_id!r}")
        description = str(data.get("description") or "")
        return cls(
            id=record_id,
            name=str(data["name"]),
            type=str(data.get("type") or ""),
            location=str(data.get("location") or ""),
            price=float(data.get("price") or 0),
            description=description,
            full_description=str(data.get("fullDescription") or description),
            sqft=float(data.get("sqft") or 0),
            image=str(data.get("image") or ""),
            coordinates=Coordinates.from_dict(data.get("coordinates")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "location": self.location,
            "price": self.price,
            "description": self.description,
            "fullDescription": self.full_description,
            "sqft": self.sqft,
            "image": self.image,
            "coordinates": self.coordinates.to_dict(),
        }


@dataclass(frozen=True)
class NewProperty:
    """A listing that has not been stored yet (no id)."""

    name: str
    type: str
    location: str
    price: float
    description: str
    full_description: Optional[str] = None
    sqft: Optional[float] = None
    image: Optional[str] = None
    coordinates: Optional[Coordinates] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewProperty":
        coords = data.get("coordinates")
        sqft = data.get("sqft")
        return cls(
            name=str(data.get("name") or ""),
            type=str(data.get("type") or ""),
            location=str(data.get("location") or ""),
            price=float(data.get("price") or 0),
            description=str(data.get("description") or ""),
            full_description=data.get("fullDescription") or None,
            sqft=float(sqft) if sqft is not None else None,
            image=data.get("image") or None,
            coordinates=Coordinates.from_dict(coords) if coords else None,
        )

    def with_defaults(self) -> "NewProperty":
        """Fill omitted optional fields.

        Empty and zero values count as omitted, so a form left at "0 sqft"
        still gets the default area.
        """
        return replace(
            self,
            full_description=self.full_description or self.description,
            sqft=self.sqft or DEFAULT_SQFT,
            image=self.image or PLACEHOLDER_IMAGE,
            coordinates=self.coordinates or Coordinates(),
        )

    def validate(self) -> None:
        missing = [
            label
            for label, value in (
                ("name", self.name),
                ("location", self.location),
                ("description", self.description),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        if self.price < 0:
            raise ValidationError("Price must not be negative")
        if self.sqft is not None and self.sqft < 0:
            raise ValidationError("Square footage must not be negative")

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the backend; call on a defaulted candidate."""
        coords = self.coordinates or Coordinates()
        return {
            "name": self.name,
            "type": self.type,
            "location": self.location,
            "price": self.price,
            "description": self.description,
            "fullDescription": self.full_description,
            "sqft": self.sqft,
            "image": self.image,
            "coordinates": coords.to_dict(),
        }
