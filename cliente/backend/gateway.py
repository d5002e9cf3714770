"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from shared.errors import ServiceError, ValidationError
from shared.protocol import Product, RecordId, Stock, Warehouseman

from .api_client import ApiClient
from .validators import validate_stock_quantity

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente al servidor de catalogo."""

    def list_products(self) -> list[Product]:
        """Obtiene el catalogo completo."""

    def get_product(self, product_id: RecordId) -> Product:
        """Obtiene un producto por id."""

    def find_product_by_barcode(self, barcode: str) -> Product | None:
        """Busca un producto por codigo de barras; ``None`` si no existe."""

    def create_product(self, product: Product) -> Product:
        """Crea un producto; el servidor asigna el id."""

    def update_product(self, product_id: RecordId, changes: dict[str, Any]) -> Product:
        """Aplica cambios parciales a un producto."""

    def update_stock_quantity(
        self,
        product_id: RecordId,
        stock_id: RecordId,
        quantity: int,
    ) -> Product:
        """Actualiza la cantidad de un stock reemplazando la lista completa."""

    def find_warehouseman_by_secret_key(self, secret_key: str) -> Warehouseman | None:
        """Resuelve la identidad asociada a una clave secreta."""

    def get_warehouseman(self, warehouseman_id: RecordId) -> Warehouseman:
        """Obtiene un operador por id."""


class RestServerGateway:
    """Implementacion del gateway sobre la API REST JSON."""

    def __init__(self, api_client: ApiClient | None = None) -> None:
        self._api = api_client or ApiClient()

    def list_products(self) -> list[Product]:
        """Obtiene todos los productos del servidor."""
        return self._run("listar productos", self._list_products)

    def get_product(self, product_id: RecordId) -> Product:
        """Obtiene un producto por su id."""
        LOGGER.debug("Obteniendo producto con id=%s", product_id)
        return self._run(
            "obtener producto",
            lambda: Product.from_dict(self._api.get(f"/products/{product_id}")),
        )

    def find_product_by_barcode(self, barcode: str) -> Product | None:
        """Retorna el primer producto con ese codigo de barras o ``None``."""
        return self._run(
            "buscar producto por codigo de barras",
            lambda: self._first(
                self._api.get("/products", params={"barcode": barcode}),
                Product.from_dict,
            ),
        )

    def create_product(self, product: Product) -> Product:
        """Envia un producto nuevo (sin id) y retorna el creado por el servidor."""
        payload = product.to_payload()
        payload.pop("id", None)
        return self._run(
            "crear producto",
            lambda: Product.from_dict(self._api.post("/products", payload)),
        )

    def update_product(self, product_id: RecordId, changes: dict[str, Any]) -> Product:
        """Envia un PATCH con los campos indicados."""
        return self._run(
            "actualizar producto",
            lambda: Product.from_dict(self._api.patch(f"/products/{product_id}", changes)),
        )

    def update_stock_quantity(
        self,
        product_id: RecordId,
        stock_id: RecordId,
        quantity: int,
    ) -> Product:
        """Cambia la cantidad del stock ``stock_id`` y reemplaza la lista de stocks."""
        validate_stock_quantity(quantity)
        LOGGER.info(
            "Actualizando cantidad: producto=%s, stock=%s, cantidad=%s",
            product_id,
            stock_id,
            quantity,
        )
        product = self.get_product(product_id)
        stocks = replace_stock_quantity(product.stocks, stock_id, quantity)
        return self.update_product(
            product_id,
            {"stocks": [stock.to_payload() for stock in stocks]},
        )

    def find_warehouseman_by_secret_key(self, secret_key: str) -> Warehouseman | None:
        """Retorna el operador con esa clave o ``None`` si la clave es invalida."""
        return self._run(
            "buscar operador por clave",
            lambda: self._first(
                self._api.get("/warehousemans", params={"secretKey": secret_key}),
                Warehouseman.from_dict,
            ),
        )

    def get_warehouseman(self, warehouseman_id: RecordId) -> Warehouseman:
        """Obtiene un operador por id."""
        return self._run(
            "obtener operador",
            lambda: Warehouseman.from_dict(self._api.get(f"/warehousemans/{warehouseman_id}")),
        )

    def _list_products(self) -> list[Product]:
        data = self._api.get("/products")
        if not isinstance(data, list):
            raise ValidationError("Se esperaba una lista de productos.")
        return [Product.from_dict(item) for item in data]

    @staticmethod
    def _first(data: Any, parse: Callable[[Any], T]) -> T | None:
        """Parsea el primer elemento de una respuesta lista; ``None`` si esta vacia."""
        if not isinstance(data, list):
            raise ValidationError("Se esperaba una lista en la respuesta de busqueda.")
        if not data:
            return None
        return parse(data[0])

    @staticmethod
    def _run(action: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except (ServiceError, ValidationError):
            LOGGER.error("Fallo al %s.", action)
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al %s.", action)
            raise ServiceError(f"No fue posible {action}.") from exc


def replace_stock_quantity(
    stocks: list[Stock],
    stock_id: RecordId,
    quantity: int,
) -> list[Stock]:
    """Retorna una copia de ``stocks`` con la cantidad del stock indicado cambiada.

    Los ids se comparan como texto porque el servidor mezcla ids numericos y de
    texto. Lanza ``ValidationError`` si el stock no pertenece al producto.
    """
    target = str(stock_id)
    if not any(str(stock.id) == target for stock in stocks):
        raise ValidationError(f"El stock {stock_id} no existe para este producto.")

    return [
        Stock(
            id=stock.id,
            name=stock.name,
            quantity=quantity if str(stock.id) == target else stock.quantity,
            localisation=stock.localisation,
        )
        for stock in stocks
    ]
