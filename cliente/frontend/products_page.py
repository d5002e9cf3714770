"""Pagina de listado de productos con busqueda, filtros y orden."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.catalog_query import CatalogQuery, SortCriteria, SortOrder
from cliente.backend.product_details_formatter import format_price
from cliente.frontend.details_dialog import ProductDetailsDialog
from cliente.frontend.dialogs import show_error
from shared.errors import ServiceError, ValidationError
from shared.protocol import Product

if TYPE_CHECKING:
    from cliente.backend.controller import AppController

_ALL_LABEL = "Todos"
_SORT_LABELS: tuple[tuple[SortCriteria, str], ...] = (
    (SortCriteria.NAME, "Nombre"),
    (SortCriteria.PRICE, "Precio"),
    (SortCriteria.QUANTITY, "Cantidad"),
)


class ProductsPage(QWidget):
    """Lista filtrable del catalogo completo."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._sort_criteria = SortCriteria.NAME
        self._sort_order = SortOrder.ASCENDING
        self._visible_products: list[Product] = []
        self._build_ui()

    def refresh(self) -> None:
        """Recarga el catalogo desde el servidor y reaplica filtros."""
        try:
            self._controller.load_products()
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al cargar productos", str(exc))
            return

        self._fill_combo(self._type_filter, self._controller.product_types)
        self._fill_combo(self._supplier_filter, self._controller.product_suppliers)
        self._apply_query()

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(10)

        self._search_input = QLineEdit(self)
        self._search_input.setPlaceholderText("Buscar productos...")
        self._search_input.textChanged.connect(self._apply_query)

        filters_layout = QHBoxLayout()
        self._type_filter = QComboBox(self)
        self._supplier_filter = QComboBox(self)
        self._fill_combo(self._type_filter, [])
        self._fill_combo(self._supplier_filter, [])
        self._type_filter.currentIndexChanged.connect(self._apply_query)
        self._supplier_filter.currentIndexChanged.connect(self._apply_query)
        filters_layout.addWidget(QLabel("Tipo:", self))
        filters_layout.addWidget(self._type_filter, 1)
        filters_layout.addWidget(QLabel("Proveedor:", self))
        filters_layout.addWidget(self._supplier_filter, 1)

        sort_layout = QHBoxLayout()
        sort_layout.addWidget(QLabel("Ordenar por:", self))
        self._sort_buttons = QButtonGroup(self)
        self._sort_buttons.setExclusive(True)
        for criteria, label in _SORT_LABELS:
            button = QPushButton(label, self)
            button.setCheckable(True)
            button.setChecked(criteria is self._sort_criteria)
            button.clicked.connect(
                lambda _checked=False, value=criteria: self._on_sort_clicked(value)
            )
            self._sort_buttons.addButton(button)
            sort_layout.addWidget(button)

        self._order_button = QPushButton("↑", self)
        self._order_button.setObjectName("sortOrderButton")
        self._order_button.clicked.connect(self._on_toggle_order)
        sort_layout.addWidget(self._order_button)
        sort_layout.addStretch(1)

        self._count_label = QLabel(self)
        self._count_label.setObjectName("countLabel")

        self._product_list = QListWidget(self)
        self._product_list.itemDoubleClicked.connect(self._on_item_activated)

        root_layout.addWidget(self._search_input)
        root_layout.addLayout(filters_layout)
        root_layout.addLayout(sort_layout)
        root_layout.addWidget(self._count_label)
        root_layout.addWidget(self._product_list, 1)

    def _current_query(self) -> CatalogQuery:
        return CatalogQuery(
            search_query=self._search_input.text(),
            filter_type=str(self._type_filter.currentData() or ""),
            filter_supplier=str(self._supplier_filter.currentData() or ""),
            sort_criteria=self._sort_criteria,
            sort_order=self._sort_order,
        )

    def _apply_query(self, *_args: object) -> None:
        """Filtra y ordena en memoria, sin llamar al servidor."""
        self._visible_products = self._controller.query_products(self._current_query())

        self._product_list.clear()
        for product in self._visible_products:
            item = QListWidgetItem(
                f"{product.name}  ·  {product.type}  ·  {format_price(product.price)}"
            )
            item.setData(Qt.ItemDataRole.UserRole, product.id)
            self._product_list.addItem(item)

        count = len(self._visible_products)
        suffix = "s" if count != 1 else ""
        self._count_label.setText(f"{count} producto{suffix} encontrado{suffix}")

    def _on_sort_clicked(self, criteria: SortCriteria) -> None:
        self._sort_criteria = criteria
        self._apply_query()

    def _on_toggle_order(self, _checked: bool = False) -> None:
        self._sort_order = self._sort_order.toggled()
        self._order_button.setText("↑" if self._sort_order is SortOrder.ASCENDING else "↓")
        self._apply_query()

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        row = self._product_list.row(item)
        if 0 <= row < len(self._visible_products):
            ProductDetailsDialog(self._visible_products[row], parent=self).exec()

    @staticmethod
    def _fill_combo(combo: QComboBox, values: list[str]) -> None:
        """Rellena un combo de filtro conservando la seleccion si sigue existiendo."""
        selected = combo.currentData()
        combo.blockSignals(True)
        combo.clear()
        combo.addItem(_ALL_LABEL, "")
        for value in values:
            combo.addItem(value, value)
        index = combo.findData(selected) if selected else 0
        combo.setCurrentIndex(max(index, 0))
        combo.blockSignals(False)
