"""Dialogo para dar de alta un producto escaneado que no existe."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QDoubleValidator, QIntValidator
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error, show_info
from parametros import DEFAULT_STOCK_LOCATION_ID
from shared.errors import ServiceError, ValidationError
from shared.protocol import NewProductDraft, Product

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class CreateProductDialog(QDialog):
    """Dialogo modal para crear un producto con su stock inicial."""

    def __init__(
        self,
        controller: AppController,
        barcode: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._barcode = barcode.strip()
        self._created_product: Product | None = None

        self.setWindowTitle("Nuevo producto")
        self.setModal(True)
        self.setMinimumSize(480, 520)

        self._build_ui()
        self._apply_styles()

    @property
    def created_product(self) -> Product | None:
        return self._created_product

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(12)

        title_label = QLabel("Producto no encontrado", card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        form_layout = QFormLayout()
        form_layout.setSpacing(10)

        self._barcode_input = QLineEdit(self._barcode, card)
        self._barcode_input.setReadOnly(True)
        self._name_input = QLineEdit(card)
        self._type_input = QLineEdit(card)
        self._price_input = QLineEdit(card)
        self._price_input.setValidator(QDoubleValidator(0.0, 1e9, 2, card))
        self._supplier_input = QLineEdit(card)
        self._image_input = QLineEdit(card)
        self._image_input.setPlaceholderText("https://...")

        self._location_input = QComboBox(card)
        for location_id, label in self._controller.list_stock_locations():
            self._location_input.addItem(label, location_id)
        self._location_input.setCurrentIndex(
            max(self._location_input.findData(DEFAULT_STOCK_LOCATION_ID), 0)
        )

        self._quantity_input = QLineEdit(card)
        self._quantity_input.setValidator(QIntValidator(0, 1_000_000, card))

        form_layout.addRow("Codigo de barras", self._barcode_input)
        form_layout.addRow("Nombre *", self._name_input)
        form_layout.addRow("Tipo *", self._type_input)
        form_layout.addRow("Precio *", self._price_input)
        form_layout.addRow("Proveedor *", self._supplier_input)
        form_layout.addRow("Imagen (URL)", self._image_input)
        form_layout.addRow("Ubicacion", self._location_input)
        form_layout.addRow("Cantidad *", self._quantity_input)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)

        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        create_button = QPushButton("Agregar", card)

        cancel_button.clicked.connect(self.reject)
        create_button.clicked.connect(self._on_create_clicked)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(create_button)

        card_layout.addWidget(title_label)
        card_layout.addLayout(form_layout)
        card_layout.addSpacing(4)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self._name_input.setFocus()

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #eef1f4;
            }
            QFrame#dialogCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 20px;
                font-weight: 700;
            }
            QLineEdit, QComboBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QLineEdit:focus, QComboBox:focus {
                border: 1px solid #6200ee;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #6200ee;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 40px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #4b00b8;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#cancelButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _collect_draft(self) -> NewProductDraft:
        """Lee el formulario; numeros vacios o invalidos quedan en None."""
        return NewProductDraft(
            name=self._name_input.text(),
            type=self._type_input.text(),
            barcode=self._barcode,
            price=_parse_float(self._price_input.text()),
            supplier=self._supplier_input.text(),
            stock_location_id=str(self._location_input.currentData() or ""),
            stock_quantity=_parse_int(self._quantity_input.text()),
            image=self._image_input.text(),
        )

    def _on_create_clicked(self) -> None:
        """Valida y crea el producto usando el controller."""
        try:
            self._created_product = self._controller.create_product(self._collect_draft())
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al crear producto", str(exc))
            return

        show_info(self, "Producto creado", "Producto agregado al stock.")
        self.accept()


def _parse_float(text: str) -> float | None:
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def _parse_int(text: str) -> int | None:
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        return None
