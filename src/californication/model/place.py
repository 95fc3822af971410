"""
Place (Data Model)
==================
A point of interest shown in the place list.

Places are plain values: two places with the same fields are equal, and the
whole list is replaced on every load.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

# Remote service spelling -> our field name
_KEY_ALIASES: Dict[str, str] = {
    "placeID": "place_id",
    "placeId": "place_id",
    "phoneNumber": "phone_number",
}


@dataclass(frozen=True)
class Place:
    name: str
    rating: float
    place_id: str = ""
    city: str = ""
    summary: str = ""
    phone_number: Optional[str] = None
    website: Optional[str] = None
    types: Tuple[str, ...] = field(default_factory=tuple)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinate(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["types"] = list(self.types)
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Place:
        """
        Build a Place from a JSON-like dict.

        Accepts both our snake_case keys and the camelCase keys of the
        remote service. Unknown keys are ignored.

        Raises:
            ValueError: if the name is missing or the rating is not a finite number.
        """
        values = {_KEY_ALIASES.get(key, key): val for key, val in data.items()}

        name = values.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Place record has no name: {data!r}")

        rating = values.get("rating")
        if isinstance(rating, bool):
            raise ValueError(f"Place '{name}' has an invalid rating: {rating!r}")
        try:
            rating = float(rating)
        except (TypeError, ValueError):
            raise ValueError(f"Place '{name}' has an invalid rating: {rating!r}") from None
        if not math.isfinite(rating):
            raise ValueError(f"Place '{name}' has a non-finite rating: {rating!r}")

        return Place(
            name=name,
            rating=rating,
            place_id=str(values.get("place_id") or ""),
            city=str(values.get("city") or ""),
            summary=str(values.get("summary") or ""),
            phone_number=values.get("phone_number") or None,
            website=values.get("website") or None,
            types=_as_types(values.get("types")),
            latitude=_optional_float(values.get("latitude")),
            longitude=_optional_float(values.get("longitude")),
        )


def _as_types(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
