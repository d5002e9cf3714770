"""Filtro, busqueda y orden del catalogo en memoria."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from shared.protocol import Product


class SortCriteria(str, Enum):
    """Campo por el cual se ordena el catalogo."""

    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"


class SortOrder(str, Enum):
    """Direccion del orden."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> SortOrder:
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


@dataclass(slots=True, frozen=True)
class CatalogQuery:
    """Parametros de busqueda, filtro y orden elegidos por el usuario."""

    search_query: str = ""
    filter_type: str = ""
    filter_supplier: str = ""
    sort_criteria: SortCriteria = SortCriteria.NAME
    sort_order: SortOrder = SortOrder.ASCENDING


def total_quantity(product: Product) -> int:
    """Suma las cantidades de todos los stocks del producto (0 si no tiene)."""
    return sum(stock.quantity for stock in product.stocks)


def matches_query(product: Product, query: CatalogQuery) -> bool:
    """Indica si el producto cumple busqueda, tipo y proveedor a la vez."""
    search = query.search_query.casefold()
    if search and search not in product.name.casefold():
        return False
    if query.filter_type and product.type != query.filter_type:
        return False
    if query.filter_supplier and product.supplier != query.filter_supplier:
        return False
    return True


def filter_and_sort_products(
    products: Sequence[Product],
    query: CatalogQuery,
) -> list[Product]:
    """Retorna una lista nueva con los productos filtrados y ordenados.

    El orden es estable en ambas direcciones: productos con la misma clave
    conservan su posicion relativa de entrada.
    """
    filtered = [product for product in products if matches_query(product, query)]
    return sorted(
        filtered,
        key=lambda product: _sort_key(product, query.sort_criteria),
        reverse=query.sort_order is SortOrder.DESCENDING,
    )


def distinct_types(products: Iterable[Product]) -> list[str]:
    """Tipos unicos del catalogo completo, en orden de aparicion."""
    return _distinct(product.type for product in products)


def distinct_suppliers(products: Iterable[Product]) -> list[str]:
    """Proveedores unicos del catalogo completo, en orden de aparicion."""
    return _distinct(product.supplier for product in products)


def name_sort_key(name: str) -> tuple[str, str, str]:
    """Clave de orden alfabetico tolerante a acentos y mayusculas."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), name.casefold(), name.swapcase()


def _sort_key(product: Product, criteria: SortCriteria) -> Any:
    if criteria is SortCriteria.PRICE:
        return product.price
    if criteria is SortCriteria.QUANTITY:
        return total_quantity(product)
    return name_sort_key(product.name)


def _distinct(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
