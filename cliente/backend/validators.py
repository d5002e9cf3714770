"""Validaciones para entradas del cliente."""

from __future__ import annotations

from shared.errors import ValidationError
from shared.protocol import NewProductDraft


def validate_secret_key(secret_key: str) -> str:
    """Valida que la clave secreta no este vacia y la retorna normalizada."""
    normalized = secret_key.strip()
    if not normalized:
        raise ValidationError("Ingresa tu clave secreta.")
    return normalized


def validate_barcode(barcode: str) -> str:
    """Valida que el codigo de barras no este vacio."""
    normalized = barcode.strip()
    if not normalized:
        raise ValidationError("El codigo de barras no puede estar vacio.")
    return normalized


def validate_stock_quantity(quantity: int) -> None:
    """Rechaza cantidades negativas antes de enviarlas al servidor."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("La cantidad debe ser un numero entero.")
    if quantity < 0:
        raise ValidationError("La cantidad no puede ser negativa.")


def validate_new_product(draft: NewProductDraft) -> None:
    """Valida los campos obligatorios del formulario de alta."""
    missing_fields: list[str] = []

    if not draft.name.strip():
        missing_fields.append("Nombre")
    if not draft.type.strip():
        missing_fields.append("Tipo")
    if not draft.barcode.strip():
        missing_fields.append("Codigo de barras")
    if draft.price is None:
        missing_fields.append("Precio")
    if not draft.supplier.strip():
        missing_fields.append("Proveedor")
    if draft.stock_quantity is None:
        missing_fields.append("Cantidad")

    if missing_fields:
        raise ValidationError(
            "Completa los campos obligatorios: " + ", ".join(missing_fields)
        )

    if draft.price is not None and draft.price < 0:
        raise ValidationError("El precio no puede ser negativo.")
    if draft.stock_quantity is not None:
        validate_stock_quantity(draft.stock_quantity)
