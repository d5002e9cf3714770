"""Pagina de escaneo: busca por codigo de barras, ajusta stock o crea el producto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.product_details_formatter import format_scan_summary_html
from cliente.frontend.create_product_dialog import CreateProductDialog
from cliente.frontend.dialogs import show_error, show_info
from shared.errors import ServiceError, TransportError, ValidationError
from shared.protocol import Product

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class ScanPage(QWidget):
    """Entrada de codigo (lector USB o teclado) y ajuste de cantidades."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._product: Product | None = None
        self._build_ui()
        self._show_product(None)

    def reset(self) -> None:
        self._barcode_input.clear()
        self._show_product(None)
        self._barcode_input.setFocus()

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(12)

        input_layout = QHBoxLayout()
        self._barcode_input = QLineEdit(self)
        self._barcode_input.setPlaceholderText("Escanea o escribe el codigo de barras")
        self._barcode_input.returnPressed.connect(self._on_search_clicked)
        search_button = QPushButton("Buscar", self)
        search_button.clicked.connect(self._on_search_clicked)
        input_layout.addWidget(self._barcode_input, 1)
        input_layout.addWidget(search_button)

        self._product_card = QFrame(self)
        self._product_card.setObjectName("productCard")
        card_layout = QVBoxLayout(self._product_card)

        self._product_label = QLabel(self._product_card)
        self._product_label.setWordWrap(True)

        update_layout = QHBoxLayout()
        self._stock_selector = QComboBox(self._product_card)
        self._stock_selector.currentIndexChanged.connect(self._on_stock_selected)
        self._quantity_input = QSpinBox(self._product_card)
        self._quantity_input.setRange(0, 1_000_000)
        self._update_button = QPushButton("Actualizar cantidad", self._product_card)
        self._update_button.clicked.connect(self._on_update_clicked)
        update_layout.addWidget(self._stock_selector, 1)
        update_layout.addWidget(self._quantity_input)
        update_layout.addWidget(self._update_button)

        card_layout.addWidget(self._product_label)
        card_layout.addLayout(update_layout)

        root_layout.addLayout(input_layout)
        root_layout.addWidget(self._product_card)
        root_layout.addStretch(1)

    def _show_product(self, product: Product | None) -> None:
        self._product = product
        self._product_card.setVisible(product is not None)
        if product is None:
            return

        self._product_label.setText(format_scan_summary_html(product))

        self._stock_selector.blockSignals(True)
        self._stock_selector.clear()
        for stock in product.stocks:
            self._stock_selector.addItem(f"{stock.name} ({stock.localisation.city})", stock.id)
        self._stock_selector.blockSignals(False)
        self._update_button.setEnabled(bool(product.stocks))
        self._on_stock_selected(0)

    def _on_stock_selected(self, index: int) -> None:
        if self._product is None or not (0 <= index < len(self._product.stocks)):
            self._quantity_input.setValue(0)
            return
        self._quantity_input.setValue(self._product.stocks[index].quantity)

    def _on_search_clicked(self, _checked: bool = False) -> None:
        """Busca el codigo; si no existe ofrece crear el producto."""
        barcode = self._barcode_input.text()
        try:
            product = self._controller.scan_barcode(barcode)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error de busqueda", str(exc))
            return

        if product is not None:
            self._show_product(product)
            return

        self._show_product(None)
        dialog = CreateProductDialog(controller=self._controller, barcode=barcode, parent=self)
        if dialog.exec() and dialog.created_product is not None:
            self._show_product(dialog.created_product)

    def _on_update_clicked(self, _checked: bool = False) -> None:
        """Envia la nueva cantidad del stock seleccionado."""
        if self._product is None or self._product.id is None or not self._product.stocks:
            show_error(self, "Error", "No hay stock para este producto.")
            return

        stock_id = self._stock_selector.currentData()
        try:
            updated = self._controller.update_stock_quantity(
                self._product.id,
                stock_id,
                self._quantity_input.value(),
            )
        except TransportError as exc:
            if exc.status_code == 404:
                show_error(self, "Error", "El producto o el stock no existe.")
            else:
                show_error(self, "Error", str(exc))
            return
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error", str(exc))
            return

        self._show_product(updated)
        show_info(self, "Cantidad actualizada", "Cantidad actualizada con exito.")
