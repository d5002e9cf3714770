"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from parametros import KNOWN_STOCK_LOCATIONS
from shared.errors import ValidationError
from shared.protocol import (
    Location,
    NewProductDraft,
    Product,
    RecordId,
    Statistics,
    Stock,
    Warehouseman,
)

from .catalog_query import (
    CatalogQuery,
    distinct_suppliers,
    distinct_types,
    filter_and_sort_products,
)
from .gateway import ServerGateway
from .statistics import calculate_statistics
from .validators import (
    validate_barcode,
    validate_new_product,
    validate_secret_key,
    validate_stock_quantity,
)

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y llamadas al servidor de catalogo."""

    def __init__(
        self,
        gateway: ServerGateway,
        stock_locations: Sequence[dict[str, object]] = KNOWN_STOCK_LOCATIONS,
    ) -> None:
        self._gateway = gateway
        self._stock_locations = tuple(stock_locations)
        self._current_user: Warehouseman | None = None
        self._products: list[Product] = []
        self._product_types: list[str] = []
        self._product_suppliers: list[str] = []

    @property
    def current_user(self) -> Warehouseman | None:
        return self._current_user

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def product_types(self) -> list[str]:
        return list(self._product_types)

    @property
    def product_suppliers(self) -> list[str]:
        return list(self._product_suppliers)

    def login(self, secret_key: str) -> Warehouseman | None:
        """Resuelve la clave secreta; retorna ``None`` si no corresponde a nadie."""
        normalized_key = validate_secret_key(secret_key)
        user = self._gateway.find_warehouseman_by_secret_key(normalized_key)
        if user is None:
            LOGGER.info("Intento de ingreso con clave invalida.")
            return None

        self._current_user = user
        LOGGER.info("Ingreso exitoso: id=%s, nombre=%s", user.id, user.name)
        return user

    def logout(self) -> None:
        """Cierra la sesion y descarta la foto del catalogo."""
        LOGGER.info("Sesion cerrada: %s", self._current_user.id if self._current_user else None)
        self._current_user = None
        self._products = []
        self._product_types = []
        self._product_suppliers = []

    def load_current_user(self) -> Warehouseman | None:
        """Recarga los datos del operador en sesion desde el servidor."""
        if self._current_user is None:
            return None

        self._current_user = self._gateway.get_warehouseman(self._current_user.id)
        return self._current_user

    def load_products(self) -> list[Product]:
        """Recarga el catalogo completo y recalcula las opciones de filtro."""
        products = self._gateway.list_products()
        self._products = products
        self._product_types = distinct_types(products)
        self._product_suppliers = distinct_suppliers(products)
        LOGGER.info("Catalogo cargado: %s productos", len(products))
        return list(products)

    def query_products(self, query: CatalogQuery) -> list[Product]:
        """Aplica busqueda, filtros y orden sobre la foto cargada."""
        return filter_and_sort_products(self._products, query)

    def scan_barcode(self, barcode: str) -> Product | None:
        """Busca un producto escaneado; ``None`` indica que hay que crearlo."""
        normalized = validate_barcode(barcode)
        product = self._gateway.find_product_by_barcode(normalized)
        if product is None:
            LOGGER.info("Codigo %s sin producto asociado.", normalized)
        else:
            LOGGER.info("Codigo %s corresponde al producto id=%s", normalized, product.id)
        return product

    def create_product(self, draft: NewProductDraft) -> Product:
        """Valida el formulario y crea el producto con su stock inicial."""
        validate_new_product(draft)
        product = self.build_product_from_draft(draft)
        created = self._gateway.create_product(product)
        LOGGER.info("Producto creado: id=%s, codigo=%s", created.id, created.barcode)
        return created

    def update_stock_quantity(
        self,
        product_id: RecordId,
        stock_id: RecordId,
        quantity: int,
    ) -> Product:
        """Actualiza la cantidad de un stock del producto."""
        validate_stock_quantity(quantity)
        return self._gateway.update_stock_quantity(product_id, stock_id, quantity)

    def load_statistics(self) -> Statistics:
        """Calcula estadisticas del catalogo; nunca lanza."""
        return calculate_statistics(self._gateway)

    def list_stock_locations(self) -> list[tuple[str, str]]:
        """Lista ubicaciones conocidas como pares (id, etiqueta)."""
        return [
            (str(location["id"]), f"{location['name']} ({location['city']})")
            for location in self._stock_locations
        ]

    def build_product_from_draft(self, draft: NewProductDraft) -> Product:
        """Construye el producto a enviar con un unico stock en la ubicacion elegida."""
        location = self._find_stock_location(draft.stock_location_id)
        stock = Stock(
            id=str(location["id"]),
            name=str(location["name"]),
            quantity=draft.stock_quantity or 0,
            localisation=Location(
                city=str(location["city"]),
                latitude=float(location["latitude"]),
                longitude=float(location["longitude"]),
            ),
        )
        return Product(
            id=None,
            name=draft.name.strip(),
            type=draft.type.strip(),
            barcode=draft.barcode.strip(),
            price=float(draft.price or 0),
            supplier=draft.supplier.strip(),
            image=draft.image.strip(),
            stocks=[stock],
            edited_by=[],
        )

    def _find_stock_location(self, location_id: str) -> dict[str, object]:
        for location in self._stock_locations:
            if str(location["id"]) == str(location_id).strip():
                return location
        raise ValidationError(f"Ubicacion de stock desconocida: {location_id}")
