from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import DecodeError, ValidationError


def _prune_zero(payload: dict[str, Any], *, keep: tuple[str, ...] = ()) -> dict[str, Any]:
    # zero value means absent: 0, 0.0, "", False, [] and None are dropped
    return {k: v for k, v in payload.items() if k in keep or v}


def _expect_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"failed to decode {what}: expected object, got {type(data).__name__}")
    return data


def _expect_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise DecodeError(f"failed to decode {what}: expected array, got {type(data).__name__}")
    return data


def _int(data: dict[str, Any], key: str, what: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"failed to decode {what}: '{key}' is not an integer")
    return value


def _float(data: dict[str, Any], key: str, what: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"failed to decode {what}: '{key}' is not a number")
    return float(value)


def _opt_float(data: dict[str, Any], key: str, what: str) -> float | None:
    if data.get(key) is None:
        return None
    return _float(data, key, what)


def _str(data: dict[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"failed to decode {what}: '{key}' is not a string")
    return value


def _bool(data: dict[str, Any], key: str, what: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeError(f"failed to decode {what}: '{key}' is not a boolean")
    return value


def _list(data: dict[str, Any], key: str, what: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    return _expect_list(value, f"{what}.{key}")


def _int_list(data: dict[str, Any], key: str, what: str) -> list[int]:
    value = data.get(key)
    if value is None:
        return []
    items = _expect_list(value, f"{what}.{key}")
    if any(isinstance(v, bool) or not isinstance(v, int) for v in items):
        raise DecodeError(f"failed to decode {what}: '{key}' must contain integers")
    return list(items)


def _str_list(data: dict[str, Any], key: str, what: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    items = _expect_list(value, f"{what}.{key}")
    if any(not isinstance(v, str) for v in items):
        raise DecodeError(f"failed to decode {what}: '{key}' must contain strings")
    return list(items)


# --- reference data ---

@dataclass(frozen=True)
class Response:
    """Generic reference-data record (currency, unit, body type, ...)."""

    id: int
    name: str

    @classmethod
    def from_payload(cls, data: Any) -> "Response":
        item = _expect_dict(data, "reference item")
        return cls(id=_int(item, "id", "reference item"), name=_str(item, "name", "reference item"))

    @classmethod
    def list_from_payload(cls, data: Any) -> list["Response"]:
        return [cls.from_payload(item) for item in _expect_list(data, "reference list")]


@dataclass(frozen=True)
class ResponseContacts:
    contact_id: int
    contact_name: str

    @classmethod
    def from_payload(cls, data: Any) -> "ResponseContacts":
        item = _expect_dict(data, "contact")
        return cls(
            contact_id=_int(item, "contactId", "contact"),
            contact_name=_str(item, "face", "contact"),
        )

    @classmethod
    def list_from_payload(cls, data: Any) -> list["ResponseContacts"]:
        return [cls.from_payload(item) for item in _expect_list(data, "contacts")]


@dataclass(frozen=True)
class CargoResponse:
    id: int

    @classmethod
    def from_payload(cls, data: Any) -> "CargoResponse":
        return cls(id=_int(_expect_dict(data, "cargo response"), "id", "cargo response"))


def find_by_name(items: list[Response], name: str) -> Response | None:
    for item in items:
        if item.name == name:
            return item
    return None


# --- cargo proposal ---

@dataclass
class PaymentForm:
    id: int = 0
    vat: bool = False

    def to_payload(self) -> dict[str, Any]:
        return _prune_zero({"id": self.id, "vat": self.vat})

    @classmethod
    def from_payload(cls, data: Any) -> "PaymentForm":
        item = _expect_dict(data, "payment form")
        return cls(id=_int(item, "id", "payment form"), vat=_bool(item, "vat", "payment form"))


@dataclass
class CargoPack:
    id: int = 0
    count: int = 0

    def to_payload(self) -> dict[str, Any]:
        return _prune_zero({"id": self.id, "count": self.count})

    @classmethod
    def from_payload(cls, data: Any) -> "CargoPack":
        item = _expect_dict(data, "cargo packaging")
        return cls(id=_int(item, "id", "cargo packaging"), count=_int(item, "count", "cargo packaging"))


@dataclass
class LoadParams:
    """One waypoint of a proposal.

    Town, area, country, region and post codes are always sent; the town id,
    coordinates and free-text address only when set.
    """

    town_name: str = ""
    area_id: int = 0
    country_sign: str = ""
    region_id: int = 0
    post_codes: list[str] = field(default_factory=list)
    town_id: int = 0
    lat: float | None = None
    lon: float | None = None
    address: str = ""

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "townName": self.town_name,
            "areaId": self.area_id,
            "countrySign": self.country_sign,
            "regionId": self.region_id,
            "postCode": list(self.post_codes),
        }
        if self.town_id:
            payload["townId"] = self.town_id
        if self.lat is not None:
            payload["lat"] = self.lat
        if self.lon is not None:
            payload["lon"] = self.lon
        if self.address:
            payload["address"] = self.address
        return payload

    @classmethod
    def from_payload(cls, data: Any) -> "LoadParams":
        what = "waypoint"
        item = _expect_dict(data, what)
        return cls(
            town_name=_str(item, "townName", what),
            area_id=_int(item, "areaId", what),
            country_sign=_str(item, "countrySign", what),
            region_id=_int(item, "regionId", what),
            post_codes=_str_list(item, "postCode", what),
            town_id=_int(item, "townId", what),
            lat=_opt_float(item, "lat", what),
            lon=_opt_float(item, "lon", what),
            address=_str(item, "address", what),
        )


@dataclass
class CargoRequest:
    waypoint_list_source: list[LoadParams] = field(default_factory=list)
    waypoint_list_target: list[LoadParams] = field(default_factory=list)
    contact_id: int = 0
    date_from: str = ""
    date_to: str = ""
    payment_value: int = 0
    payment_currency_id: int = 0
    payment_unit_id: int = 0
    payment_moment_id: int = 0
    payment_forms: list[PaymentForm] = field(default_factory=list)
    cargo_body_type_ids: list[int] = field(default_factory=list)
    cargo_packaging: list[CargoPack] = field(default_factory=list)
    lorry_amount: int = 0
    load_types: list[int] = field(default_factory=list)
    groupage: bool = False
    content_name: str = ""
    size_mass: float = 0.0
    size_volume: float = 0.0

    def validate(self) -> None:
        if not self.waypoint_list_source:
            raise ValidationError("invalid request: waypointListSource is required")
        if not self.waypoint_list_target:
            raise ValidationError("invalid request: waypointListTarget is required")

    def to_payload(self) -> dict[str, Any]:
        return _prune_zero(
            {
                "contactId": self.contact_id,
                "dateFrom": self.date_from,
                "dateTo": self.date_to,
                "paymentPrice": self.payment_value,
                "paymentCurrencyId": self.payment_currency_id,
                "paymentUnitId": self.payment_unit_id,
                "paymentMomentId": self.payment_moment_id,
                "cargoBodyTypeIds": list(self.cargo_body_type_ids),
                "cargoPackaging": [p.to_payload() for p in self.cargo_packaging],
                "paymentForms": [f.to_payload() for f in self.payment_forms],
                "lorryAmount": self.lorry_amount,
                "loadTypes": list(self.load_types),
                "groupage": self.groupage,
                "contentName": self.content_name,
                "sizeMass": self.size_mass,
                "sizeVolume": self.size_volume,
                "waypointListSource": [w.to_payload() for w in self.waypoint_list_source],
                "waypointListTarget": [w.to_payload() for w in self.waypoint_list_target],
            },
            keep=("waypointListSource", "waypointListTarget"),
        )

    @classmethod
    def from_payload(cls, data: Any) -> "CargoRequest":
        what = "cargo request"
        item = _expect_dict(data, what)
        return cls(
            waypoint_list_source=[
                LoadParams.from_payload(w) for w in _list(item, "waypointListSource", what)
            ],
            waypoint_list_target=[
                LoadParams.from_payload(w) for w in _list(item, "waypointListTarget", what)
            ],
            contact_id=_int(item, "contactId", what),
            date_from=_str(item, "dateFrom", what),
            date_to=_str(item, "dateTo", what),
            payment_value=_int(item, "paymentPrice", what),
            payment_currency_id=_int(item, "paymentCurrencyId", what),
            payment_unit_id=_int(item, "paymentUnitId", what),
            payment_moment_id=_int(item, "paymentMomentId", what),
            payment_forms=[PaymentForm.from_payload(f) for f in _list(item, "paymentForms", what)],
            cargo_body_type_ids=_int_list(item, "cargoBodyTypeIds", what),
            cargo_packaging=[CargoPack.from_payload(p) for p in _list(item, "cargoPackaging", what)],
            lorry_amount=_int(item, "lorryAmount", what),
            load_types=_int_list(item, "loadTypes", what),
            groupage=_bool(item, "groupage", what),
            content_name=_str(item, "contentName", what),
            size_mass=_float(item, "sizeMass", what),
            size_volume=_float(item, "sizeVolume", what),
        )
