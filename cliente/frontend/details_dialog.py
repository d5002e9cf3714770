"""Dialogo para visualizar, copiar e imprimir detalles de producto."""

from __future__ import annotations

from PyQt6.QtGui import QColor, QTextDocument
from PyQt6.QtPrintSupport import QPrintDialog, QPrinter
from PyQt6.QtWidgets import (
    QApplication,
    QDialog,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.product_details_formatter import (
    STOCK_LEVEL_COLORS,
    format_location,
    format_product_details_html,
    format_product_details_text,
    stock_level,
)
from shared.protocol import Product


class ProductDetailsDialog(QDialog):
    """Dialogo con el detalle de un producto y sus stocks."""

    def __init__(self, product: Product, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._product = product

        self.setWindowTitle("Detalles del producto")
        self.setModal(True)
        self.resize(620, 480)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye layout y widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        title_label = QLabel(self._product.name, self)
        title_label.setObjectName("detailsTitle")

        self._details_view = QTextEdit(self)
        self._details_view.setReadOnly(True)
        self._details_view.setPlainText(format_product_details_text(self._product))
        self._details_view.setMinimumHeight(160)

        stocks_label = QLabel("Ubicaciones", self)
        stocks_label.setObjectName("detailsTitle")

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._details_view)
        root_layout.addWidget(stocks_label)

        for stock in self._product.stocks:
            color = STOCK_LEVEL_COLORS[stock_level(stock.quantity)]
            stock_label = QLabel(
                f'<b>{stock.name}</b> · <span style="color:{color};">'
                f"Cantidad: {stock.quantity}</span><br/>"
                f"{format_location(stock.localisation)}",
                self,
            )
            root_layout.addWidget(stock_label)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)

        copy_button = QPushButton("Copiar", self)
        print_button = QPushButton("Imprimir", self)
        back_button = QPushButton("Regresar", self)
        back_button.setObjectName("backButton")

        copy_button.clicked.connect(self._copy_to_clipboard)
        print_button.clicked.connect(self._print_details)
        back_button.clicked.connect(self.close)

        buttons_layout.addWidget(copy_button)
        buttons_layout.addWidget(print_button)
        buttons_layout.addWidget(back_button)
        root_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(22)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 24))
        self.setGraphicsEffect(shadow)

    def _apply_styles(self) -> None:
        """Aplica estilos alineados al look general de la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #ffffff;
            }
            QLabel#detailsTitle {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
            }
            QTextEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 14px;
                padding: 10px;
            }
            QPushButton {
                background-color: #6200ee;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #4b00b8;
            }
            QPushButton#backButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#backButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _copy_to_clipboard(self) -> None:
        """Copia el detalle del producto al portapapeles."""
        QApplication.clipboard().setText(format_product_details_text(self._product))

    def _print_details(self) -> None:
        """Abre el dialogo de impresion con la ficha del producto."""
        printer = QPrinter()
        dialog = QPrintDialog(printer, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return

        document = QTextDocument(self)
        document.setHtml(format_product_details_html(self._product))
        document.print(printer)
