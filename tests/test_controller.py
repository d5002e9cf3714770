"""Tests de AppController con un gateway en memoria."""

from __future__ import annotations

import unittest
from typing import Any

from cliente.backend.catalog_query import CatalogQuery, SortCriteria
from cliente.backend.controller import AppController
from cliente.backend.gateway import replace_stock_quantity
from shared.errors import TransportError, ValidationError
from shared.protocol import (
    Location,
    NewProductDraft,
    Product,
    RecordId,
    Stock,
    Warehouseman,
)


class InMemoryGateway:
    """Gateway de prueba que guarda productos y operadores en memoria."""

    def __init__(self) -> None:
        self.products: dict[RecordId, Product] = {}
        self.users: list[Warehouseman] = []
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self._next_id = 100

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def list_products(self) -> list[Product]:
        self._record("list_products")
        return list(self.products.values())

    def get_product(self, product_id: RecordId) -> Product:
        self._record("get_product")
        return self.products[product_id]

    def find_product_by_barcode(self, barcode: str) -> Product | None:
        self._record("find_product_by_barcode")
        matches = [product for product in self.products.values() if product.barcode == barcode]
        return matches[0] if matches else None

    def create_product(self, product: Product) -> Product:
        self._record("create_product")
        self._next_id += 1
        product.id = self._next_id
        self.products[product.id] = product
        return product

    def update_product(self, product_id: RecordId, changes: dict[str, Any]) -> Product:
        self._record("update_product")
        return self.products[product_id]

    def update_stock_quantity(
        self,
        product_id: RecordId,
        stock_id: RecordId,
        quantity: int,
    ) -> Product:
        self._record("update_stock_quantity")
        product = self.products[product_id]
        product.stocks = replace_stock_quantity(product.stocks, stock_id, quantity)
        return product

    def find_warehouseman_by_secret_key(self, secret_key: str) -> Warehouseman | None:
        self._record("find_warehouseman_by_secret_key")
        matches = [user for user in self.users if user.secret_key == secret_key]
        return matches[0] if matches else None

    def get_warehouseman(self, warehouseman_id: RecordId) -> Warehouseman:
        self._record("get_warehouseman")
        return next(user for user in self.users if user.id == warehouseman_id)


def build_product(
    product_id: int,
    name: str,
    product_type: str,
    price: float,
    quantity: int,
    barcode: str = "",
) -> Product:
    return Product(
        id=product_id,
        name=name,
        type=product_type,
        barcode=barcode or f"BC-{product_id}",
        price=price,
        supplier="Norte",
        stocks=[
            Stock(
                id="1999",
                name="Gueliz B2",
                quantity=quantity,
                localisation=Location("Marrakesh", 34.68, -1.91),
            )
        ],
    )


def build_draft(**overrides: Any) -> NewProductDraft:
    values: dict[str, Any] = {
        "name": "Cafe",
        "type": "Bebida",
        "barcode": "6111000000001",
        "price": 25.5,
        "supplier": "Sur",
        "stock_location_id": "2991",
        "stock_quantity": 8,
        "image": "",
    }
    values.update(overrides)
    return NewProductDraft(**values)


class AppControllerSessionTests(unittest.TestCase):
    """Valida ingreso y cierre de sesion."""

    def setUp(self) -> None:
        self.gateway = InMemoryGateway()
        self.gateway.users.append(
            Warehouseman(id=1, name="John Doe", city="Oujda", secret_key="validKey")
        )
        self.controller = AppController(gateway=self.gateway)

    def test_login_with_valid_key_sets_current_user(self) -> None:
        """Una clave valida deja al operador en sesion."""
        user = self.controller.login("  validKey ")

        self.assertIsNotNone(user)
        self.assertEqual(self.controller.current_user, user)

    def test_login_with_unknown_key_returns_none(self) -> None:
        """Una clave desconocida no es un error: retorna None."""
        self.assertIsNone(self.controller.login("invalidKey"))
        self.assertIsNone(self.controller.current_user)

    def test_blank_key_is_rejected_without_request(self) -> None:
        """Clave vacia se valida antes de consultar el servidor."""
        with self.assertRaises(ValidationError):
            self.controller.login("   ")
        self.assertEqual(self.gateway.calls, [])

    def test_logout_clears_session_and_snapshot(self) -> None:
        """Cerrar sesion limpia usuario y catalogo."""
        self.gateway.products[1] = build_product(1, "Banana", "A", 2, 5)
        self.controller.login("validKey")
        self.controller.load_products()

        self.controller.logout()

        self.assertIsNone(self.controller.current_user)
        self.assertEqual(self.controller.products, [])
        self.assertEqual(self.controller.product_types, [])

    def test_load_current_user_refetches_identity(self) -> None:
        """El perfil se recarga por id."""
        self.controller.login("validKey")

        user = self.controller.load_current_user()

        self.assertEqual(user.name, "John Doe")
        self.assertEqual(self.gateway.calls[-1], "get_warehouseman")

    def test_load_current_user_without_session(self) -> None:
        """Sin sesion no hay usuario que cargar."""
        self.assertIsNone(self.controller.load_current_user())


class AppControllerCatalogTests(unittest.TestCase):
    """Valida carga, consulta y estadisticas del catalogo."""

    def setUp(self) -> None:
        self.gateway = InMemoryGateway()
        self.gateway.products[1] = build_product(1, "Banana", "A", 2, 5, barcode="111")
        self.gateway.products[2] = build_product(2, "Apple", "B", 1, 0, barcode="222")
        self.controller = AppController(gateway=self.gateway)

    def test_load_products_recomputes_filter_options(self) -> None:
        """Cargar el catalogo actualiza tipos y proveedores."""
        self.controller.load_products()

        self.assertEqual(self.controller.product_types, ["A", "B"])
        self.assertEqual(self.controller.product_suppliers, ["Norte"])

    def test_query_products_runs_on_loaded_snapshot(self) -> None:
        """Consultar no llama al servidor."""
        self.controller.load_products()
        calls_before = len(self.gateway.calls)

        result = self.controller.query_products(
            CatalogQuery(sort_criteria=SortCriteria.PRICE)
        )

        self.assertEqual([product.name for product in result], ["Apple", "Banana"])
        self.assertEqual(len(self.gateway.calls), calls_before)

    def test_load_products_propagates_transport_errors(self) -> None:
        """La carga del catalogo no oculta fallos de red."""
        self.gateway.fail_with = TransportError("caido")

        with self.assertRaises(TransportError):
            self.controller.load_products()

    def test_load_statistics(self) -> None:
        """Estadisticas del escenario Banana/Apple."""
        statistics = self.controller.load_statistics()

        self.assertEqual(statistics.total_products, 2)
        self.assertEqual(statistics.out_of_stock, 1)
        self.assertEqual(statistics.total_stock_value, 10)

    def test_load_statistics_is_fail_soft(self) -> None:
        """Con el servidor caido las estadisticas vuelven en cero."""
        self.gateway.fail_with = TransportError("caido")

        with self.assertLogs("cliente.backend.statistics", level="ERROR"):
            statistics = self.controller.load_statistics()

        self.assertEqual(statistics.total_products, 0)


class AppControllerScanTests(unittest.TestCase):
    """Valida escaneo, alta de productos y ajuste de stock."""

    def setUp(self) -> None:
        self.gateway = InMemoryGateway()
        self.gateway.products[1] = build_product(1, "Banana", "A", 2, 5, barcode="111")
        self.controller = AppController(gateway=self.gateway)

    def test_scan_existing_barcode(self) -> None:
        """Un codigo conocido retorna su producto."""
        product = self.controller.scan_barcode(" 111 ")
        self.assertEqual(product.id, 1)

    def test_scan_unknown_barcode_returns_none(self) -> None:
        """Un codigo desconocido retorna None, no un error."""
        self.assertIsNone(self.controller.scan_barcode("999"))

    def test_scan_blank_barcode_is_rejected(self) -> None:
        """Codigo vacio se rechaza antes de consultar."""
        with self.assertRaises(ValidationError):
            self.controller.scan_barcode("")
        self.assertEqual(self.gateway.calls, [])

    def test_create_product_builds_single_stock_at_location(self) -> None:
        """El alta crea un stock en la ubicacion elegida y editedBy vacio."""
        created = self.controller.create_product(build_draft())

        self.assertEqual(created.id, 101)
        self.assertEqual(created.price, 25.5)
        self.assertEqual(len(created.stocks), 1)
        self.assertEqual(created.stocks[0].id, "2991")
        self.assertEqual(created.stocks[0].name, "Lazari H2")
        self.assertEqual(created.stocks[0].localisation.city, "Oujda")
        self.assertEqual(created.stocks[0].quantity, 8)
        self.assertEqual(created.edited_by, [])

    def test_create_product_with_missing_fields_sends_nothing(self) -> None:
        """Campos obligatorios faltantes se informan juntos sin llamar al servidor."""
        with self.assertRaises(ValidationError) as context:
            self.controller.create_product(build_draft(name="", price=None))

        self.assertIn("Nombre", str(context.exception))
        self.assertIn("Precio", str(context.exception))
        self.assertEqual(self.gateway.calls, [])

    def test_create_product_with_unknown_location(self) -> None:
        """Una ubicacion desconocida se rechaza."""
        with self.assertRaises(ValidationError):
            self.controller.create_product(build_draft(stock_location_id="0000"))
        self.assertEqual(self.gateway.calls, [])

    def test_update_stock_quantity(self) -> None:
        """Actualiza la cantidad del stock indicado."""
        updated = self.controller.update_stock_quantity(1, "1999", 40)
        self.assertEqual(updated.stocks[0].quantity, 40)

    def test_update_stock_quantity_rejects_negative(self) -> None:
        """Cantidades negativas no llegan al gateway."""
        with self.assertRaises(ValidationError):
            self.controller.update_stock_quantity(1, "1999", -3)
        self.assertEqual(self.gateway.calls, [])

    def test_list_stock_locations(self) -> None:
        """Las ubicaciones conocidas se listan con su ciudad."""
        self.assertEqual(
            self.controller.list_stock_locations(),
            [("1999", "Gueliz B2 (Marrakesh)"), ("2991", "Lazari H2 (Oujda)")],
        )


if __name__ == "__main__":
    unittest.main()
