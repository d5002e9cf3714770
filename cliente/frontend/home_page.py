"""Pagina de inicio con estadisticas generales."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from cliente.backend.product_details_formatter import format_price

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class HomePage(QWidget):
    """Muestra saludo y tarjetas de estadisticas."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._build_ui()

    def refresh(self) -> None:
        """Recalcula estadisticas; un fallo del servidor se muestra como ceros."""
        user = self._controller.current_user
        self._welcome_label.setText(f"Bienvenido, {user.name if user else 'Usuario'}")

        statistics = self._controller.load_statistics()
        self._total_label.setText(str(statistics.total_products))
        self._out_of_stock_label.setText(str(statistics.out_of_stock))
        self._value_label.setText(format_price(statistics.total_stock_value))

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(32, 32, 32, 32)
        root_layout.setSpacing(16)

        self._welcome_label = QLabel(self)
        self._welcome_label.setObjectName("titleLabel")
        self._welcome_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        stats_title = QLabel("Estadisticas generales", self)
        stats_title.setObjectName("sectionLabel")

        total_card, self._total_label = self._build_stat_card("Total productos", "statCard")
        out_card, self._out_of_stock_label = self._build_stat_card(
            "Sin stock", "outOfStockCard"
        )
        value_card, self._value_label = self._build_stat_card("Valor del stock", "valueCard")

        refresh_button = QPushButton("Actualizar", self)
        refresh_button.clicked.connect(self.refresh)

        root_layout.addWidget(self._welcome_label)
        root_layout.addWidget(stats_title)
        root_layout.addWidget(total_card)
        root_layout.addWidget(out_card)
        root_layout.addWidget(value_card)
        root_layout.addStretch(1)
        root_layout.addWidget(refresh_button)

    def _build_stat_card(self, title: str, object_name: str) -> tuple[QFrame, QLabel]:
        card = QFrame(self)
        card.setObjectName(object_name)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 16, 20, 16)

        title_label = QLabel(title, card)
        value_label = QLabel("0", card)
        value_label.setObjectName("statNumber")

        layout.addWidget(title_label)
        layout.addWidget(value_label)
        return card, value_label
