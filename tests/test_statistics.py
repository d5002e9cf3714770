"""Tests de estadisticas agregadas del catalogo."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.statistics import (
    calculate_statistics,
    compute_statistics,
    is_out_of_stock,
)
from shared.errors import TransportError
from shared.protocol import Location, Product, Statistics, Stock


def build_product(
    name: str,
    price: float,
    quantities: tuple[int, ...],
    solde: float | None = None,
) -> Product:
    return Product(
        id=name,
        name=name,
        type="A",
        barcode=name,
        price=price,
        supplier="Proveedor",
        solde=solde,
        stocks=[
            Stock(
                id=index,
                name=f"Stock {index}",
                quantity=quantity,
                localisation=Location(city="Oujda", latitude=0.0, longitude=0.0),
            )
            for index, quantity in enumerate(quantities, start=1)
        ],
    )


class ComputeStatisticsTests(unittest.TestCase):
    """Valida el calculo puro de estadisticas."""

    def test_empty_catalog(self) -> None:
        """Catalogo vacio retorna todo en cero."""
        statistics = compute_statistics([])

        self.assertEqual(statistics.total_products, 0)
        self.assertEqual(statistics.out_of_stock, 0)
        self.assertEqual(statistics.total_stock_value, 0)

    def test_out_of_stock_rules(self) -> None:
        """Sin stocks cuenta como agotado; un stock con cantidad no."""
        self.assertTrue(is_out_of_stock(build_product("sin-stock", 1, ())))
        self.assertTrue(is_out_of_stock(build_product("ceros", 1, (0, 0))))
        self.assertFalse(is_out_of_stock(build_product("mixto", 1, (0, 5))))

    def test_stock_value_uses_price_without_solde(self) -> None:
        """price 10 x quantity 3 = 30."""
        statistics = compute_statistics([build_product("p", 10, (3,))])
        self.assertEqual(statistics.total_stock_value, 30)

    def test_stock_value_uses_solde_when_present(self) -> None:
        """Con solde 8 el valor pasa a 24."""
        statistics = compute_statistics([build_product("p", 10, (3,), solde=8)])
        self.assertEqual(statistics.total_stock_value, 24)

    def test_scenario_banana_apple(self) -> None:
        """Dos productos, uno agotado, valor total 10."""
        products = [
            build_product("Banana", 2, (5,)),
            build_product("Apple", 1, (0,)),
        ]

        statistics = compute_statistics(products)

        self.assertEqual(statistics.total_products, 2)
        self.assertEqual(statistics.out_of_stock, 1)
        self.assertEqual(statistics.total_stock_value, 10)

    def test_value_is_rounded_to_cents(self) -> None:
        """El total se redondea a dos decimales sin errores de coma flotante."""
        products = [
            build_product("a", 0.1, (1,)),
            build_product("b", 0.2, (1,)),
            build_product("c", 1.005, (1,)),
        ]

        statistics = compute_statistics(products)

        self.assertEqual(statistics.total_stock_value, 1.31)

    def test_trend_lists_are_always_empty(self) -> None:
        """Los campos de tendencias existen y siempre estan vacios."""
        statistics = compute_statistics([build_product("p", 1, (1,))])

        self.assertEqual(statistics.most_added_products, [])
        self.assertEqual(statistics.most_removed_products, [])
        self.assertEqual(statistics.to_payload()["mostAddedProducts"], [])


class CalculateStatisticsTests(unittest.TestCase):
    """Valida la obtencion tolerante a fallos."""

    def test_fetches_fresh_snapshot(self) -> None:
        """Calcula sobre lo que retorna el gateway."""
        gateway = mock.Mock()
        gateway.list_products.return_value = [build_product("p", 2, (2,))]

        statistics = calculate_statistics(gateway)

        gateway.list_products.assert_called_once_with()
        self.assertEqual(statistics.total_stock_value, 4)

    def test_transport_failure_returns_zeroed_statistics(self) -> None:
        """Un fallo del servidor no se propaga: retorna ceros."""
        gateway = mock.Mock()
        gateway.list_products.side_effect = TransportError("caido", status_code=500)

        with self.assertLogs("cliente.backend.statistics", level="ERROR"):
            statistics = calculate_statistics(gateway)

        self.assertEqual(statistics, Statistics.zero())

    def test_processing_failure_returns_zeroed_statistics(self) -> None:
        """Datos inesperados tambien resultan en ceros."""
        gateway = mock.Mock()
        gateway.list_products.return_value = [object()]

        with self.assertLogs("cliente.backend.statistics", level="ERROR"):
            statistics = calculate_statistics(gateway)

        self.assertEqual(statistics.total_products, 0)
        self.assertEqual(statistics.total_stock_value, 0)


if __name__ == "__main__":
    unittest.main()
