"""Estadisticas agregadas del catalogo."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from shared.protocol import Product, Statistics

if TYPE_CHECKING:
    from .gateway import ServerGateway

LOGGER = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


def is_out_of_stock(product: Product) -> bool:
    """Un producto sin stocks o con todas sus cantidades en 0 esta agotado."""
    return all(stock.quantity == 0 for stock in product.stocks)


def stock_value(product: Product) -> Decimal:
    """Valor del stock del producto usando su precio efectivo, sin redondear."""
    unit_price = Decimal(str(product.effective_price))
    return sum(
        (stock.quantity * unit_price for stock in product.stocks),
        start=Decimal(0),
    )


def compute_statistics(products: Sequence[Product]) -> Statistics:
    """Calcula el resumen del catalogo a partir de una foto completa."""
    total_value = sum((stock_value(product) for product in products), start=Decimal(0))
    return Statistics(
        total_products=len(products),
        out_of_stock=sum(1 for product in products if is_out_of_stock(product)),
        total_stock_value=float(total_value.quantize(_CENTS, rounding=ROUND_HALF_UP)),
    )


def calculate_statistics(gateway: ServerGateway) -> Statistics:
    """Obtiene el catalogo y calcula estadisticas; ante cualquier fallo retorna ceros.

    Es el unico punto del cliente que no propaga errores del servidor.
    """
    try:
        products = gateway.list_products()
        return compute_statistics(products)
    except Exception:
        LOGGER.exception("No fue posible calcular estadisticas; se muestran en cero.")
        return Statistics.zero()
