"""Tests de validaciones del cliente."""

from __future__ import annotations

import unittest

from cliente.backend.validators import (
    validate_barcode,
    validate_new_product,
    validate_secret_key,
    validate_stock_quantity,
)
from shared.errors import ValidationError
from shared.protocol import NewProductDraft


class ValidatorsTests(unittest.TestCase):
    """Valida chequeos previos a cualquier request."""

    def test_secret_key_is_trimmed(self) -> None:
        """La clave se retorna sin espacios."""
        self.assertEqual(validate_secret_key(" abc "), "abc")

    def test_blank_barcode(self) -> None:
        """Codigo vacio es invalido."""
        with self.assertRaises(ValidationError):
            validate_barcode("  ")

    def test_stock_quantity_rules(self) -> None:
        """Cero es valido; negativos, booleanos y no enteros no."""
        validate_stock_quantity(0)
        for value in (-1, True, 1.5):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    validate_stock_quantity(value)  # type: ignore[arg-type]

    def test_new_product_negative_price(self) -> None:
        """Precio negativo se rechaza aunque esten todos los campos."""
        draft = NewProductDraft(
            name="Cafe",
            type="Bebida",
            barcode="1",
            price=-1.0,
            supplier="Sur",
            stock_location_id="1999",
            stock_quantity=1,
        )
        with self.assertRaises(ValidationError):
            validate_new_product(draft)

    def test_new_product_lists_all_missing_fields(self) -> None:
        """El mensaje enumera todos los campos faltantes."""
        draft = NewProductDraft(
            name="",
            type="",
            barcode="",
            price=None,
            supplier="",
            stock_location_id="1999",
            stock_quantity=None,
        )
        with self.assertRaises(ValidationError) as context:
            validate_new_product(draft)

        message = str(context.exception)
        for field_name in ("Nombre", "Tipo", "Codigo de barras", "Precio", "Proveedor", "Cantidad"):
            self.assertIn(field_name, message)


if __name__ == "__main__":
    unittest.main()
