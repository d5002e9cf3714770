"""Registros tipados intercambiados con el servidor de catalogo.

Cada registro sabe construirse desde el JSON recibido (``from_dict``), validando
la forma de los datos en lugar de confiar en ella, y serializarse de vuelta al
formato del servidor (``to_payload``), que usa nombres en camelCase.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from shared.errors import ValidationError

RecordId = int | str


def _require_mapping(data: Any, record: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(f"{record}: se esperaba un objeto JSON, se recibio {type(data).__name__}.")
    return data


def _require_id(data: Mapping[str, Any], key: str, record: str) -> RecordId:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError(f"{record}: campo '{key}' ausente o invalido.")
    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{record}: campo '{key}' no puede estar vacio.")
    return value


def _require_str(data: Mapping[str, Any], key: str, record: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValidationError(f"{record}: campo '{key}' debe ser texto.")
    return value


def _optional_str(data: Mapping[str, Any], key: str, record: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{record}: campo '{key}' debe ser texto.")
    return value


def _require_number(data: Mapping[str, Any], key: str, record: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{record}: campo '{key}' debe ser numerico.")
    return float(value)


def _optional_number(data: Mapping[str, Any], key: str, record: str) -> float | None:
    if data.get(key) is None:
        return None
    return _require_number(data, key, record)


def _require_int(data: Mapping[str, Any], key: str, record: str) -> int:
    value = data.get(key)
    if isinstance(value, bool):
        raise ValidationError(f"{record}: campo '{key}' debe ser entero.")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise ValidationError(f"{record}: campo '{key}' debe ser entero.")
    return value


def _list_of(data: Mapping[str, Any], key: str, record: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{record}: campo '{key}' debe ser una lista.")
    return value


@dataclass(slots=True)
class Location:
    """Ubicacion fisica de un stock."""

    city: str
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        payload = _require_mapping(data, "Localisation")
        return cls(
            city=_optional_str(payload, "city", "Localisation"),
            latitude=_require_number(payload, "latitude", "Localisation"),
            longitude=_require_number(payload, "longitude", "Localisation"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {"city": self.city, "latitude": self.latitude, "longitude": self.longitude}


@dataclass(slots=True)
class Stock:
    """Cantidad de un producto en una ubicacion."""

    id: RecordId
    name: str
    quantity: int
    localisation: Location

    @classmethod
    def from_dict(cls, data: Any) -> Stock:
        payload = _require_mapping(data, "Stock")
        quantity = _require_int(payload, "quantity", "Stock")
        if quantity < 0:
            raise ValidationError("Stock: la cantidad no puede ser negativa.")
        return cls(
            id=_require_id(payload, "id", "Stock"),
            name=_optional_str(payload, "name", "Stock"),
            quantity=quantity,
            localisation=Location.from_dict(payload.get("localisation")),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "localisation": self.localisation.to_payload(),
        }


@dataclass(slots=True)
class EditHistory:
    """Entrada de auditoria de modificaciones de un producto."""

    warehouseman_id: RecordId
    at: str

    @classmethod
    def from_dict(cls, data: Any) -> EditHistory:
        payload = _require_mapping(data, "EditHistory")
        return cls(
            warehouseman_id=_require_id(payload, "warehousemanId", "EditHistory"),
            at=_require_str(payload, "at", "EditHistory"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {"warehousemanId": self.warehouseman_id, "at": self.at}


@dataclass(slots=True)
class Product:
    """Producto del catalogo con sus stocks por ubicacion."""

    id: RecordId | None
    name: str
    type: str
    barcode: str
    price: float
    supplier: str
    image: str = ""
    solde: float | None = None
    stocks: list[Stock] = field(default_factory=list)
    edited_by: list[EditHistory] = field(default_factory=list)

    @property
    def effective_price(self) -> float:
        """Precio usado para valorizar stock: ``solde`` si existe, si no ``price``."""
        return self.solde if self.solde is not None else self.price

    @classmethod
    def from_dict(cls, data: Any) -> Product:
        payload = _require_mapping(data, "Product")
        price = _require_number(payload, "price", "Product")
        if price < 0:
            raise ValidationError("Product: el precio no puede ser negativo.")
        return cls(
            id=_require_id(payload, "id", "Product"),
            name=_require_str(payload, "name", "Product"),
            type=_optional_str(payload, "type", "Product"),
            barcode=_optional_str(payload, "barcode", "Product"),
            price=price,
            supplier=_optional_str(payload, "supplier", "Product"),
            image=_optional_str(payload, "image", "Product"),
            solde=_optional_number(payload, "solde", "Product"),
            stocks=[Stock.from_dict(item) for item in _list_of(payload, "stocks", "Product")],
            edited_by=[
                EditHistory.from_dict(item) for item in _list_of(payload, "editedBy", "Product")
            ],
        )

    def to_payload(self) -> dict[str, Any]:
        """Serializa el producto; omite ``id`` cuando aun no fue asignado."""
        payload: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "barcode": self.barcode,
            "price": self.price,
            "supplier": self.supplier,
            "image": self.image,
            "stocks": [stock.to_payload() for stock in self.stocks],
            "editedBy": [entry.to_payload() for entry in self.edited_by],
        }
        if self.solde is not None:
            payload["solde"] = self.solde
        if self.id is not None:
            payload = {"id": self.id, **payload}
        return payload


@dataclass(slots=True)
class Warehouseman:
    """Identidad de un operador de bodega."""

    id: RecordId
    name: str
    dob: str = ""
    city: str = ""
    secret_key: str = ""
    warehouse_id: RecordId | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Warehouseman:
        payload = _require_mapping(data, "Warehouseman")
        warehouse_id = payload.get("warehouseId")
        return cls(
            id=_require_id(payload, "id", "Warehouseman"),
            name=_require_str(payload, "name", "Warehouseman"),
            dob=_optional_str(payload, "dob", "Warehouseman"),
            city=_optional_str(payload, "city", "Warehouseman"),
            secret_key=_optional_str(payload, "secretKey", "Warehouseman"),
            warehouse_id=(
                None
                if warehouse_id is None
                else _require_id(payload, "warehouseId", "Warehouseman")
            ),
        )


@dataclass(slots=True)
class Statistics:
    """Resumen agregado del catalogo."""

    total_products: int = 0
    out_of_stock: int = 0
    total_stock_value: float = 0.0
    most_added_products: list[Product] = field(default_factory=list)
    most_removed_products: list[Product] = field(default_factory=list)

    @classmethod
    def zero(cls) -> Statistics:
        """Retorna estadisticas vacias, usadas cuando no se pudo calcular."""
        return cls()

    def to_payload(self) -> dict[str, Any]:
        return {
            "totalProducts": self.total_products,
            "outOfStock": self.out_of_stock,
            "totalStockValue": self.total_stock_value,
            "mostAddedProducts": [product.to_payload() for product in self.most_added_products],
            "mostRemovedProducts": [
                product.to_payload() for product in self.most_removed_products
            ],
        }


@dataclass(slots=True)
class NewProductDraft:
    """DTO para capturar datos del formulario de alta desde el escaner."""

    name: str
    type: str
    barcode: str
    price: float | None
    supplier: str
    stock_location_id: str
    stock_quantity: int | None
    image: str = ""
