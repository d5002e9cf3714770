"""Pagina de ingreso por clave secreta."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error
from shared.errors import ServiceError, ValidationError
from shared.protocol import Warehouseman

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class LoginPage(QWidget):
    """Formulario de ingreso del operador."""

    def __init__(
        self,
        controller: AppController,
        on_logged_in: Callable[[Warehouseman], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._on_logged_in = on_logged_in
        self._build_ui()

    def reset(self) -> None:
        self._secret_key_input.clear()
        self._secret_key_input.setFocus()

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(40, 40, 40, 40)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(self)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(40, 40, 40, 40)
        card_layout.setSpacing(16)

        title_label = QLabel("Bienvenido a Stock Scan", card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 22, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        subtitle_label = QLabel("Ingresa tu clave secreta de operador", card)
        subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._secret_key_input = QLineEdit(card)
        self._secret_key_input.setEchoMode(QLineEdit.EchoMode.Password)
        self._secret_key_input.setPlaceholderText("Clave secreta")
        self._secret_key_input.returnPressed.connect(self._on_login_clicked)

        login_button = QPushButton("Ingresar", card)
        login_button.setCursor(Qt.CursorShape.PointingHandCursor)
        login_button.clicked.connect(self._on_login_clicked)

        card_layout.addWidget(title_label)
        card_layout.addWidget(subtitle_label)
        card_layout.addSpacing(12)
        card_layout.addWidget(self._secret_key_input)
        card_layout.addWidget(login_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _on_login_clicked(self, _checked: bool = False) -> None:
        """Valida la clave contra el servidor y notifica a la ventana."""
        try:
            user = self._controller.login(self._secret_key_input.text())
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error de ingreso", str(exc))
            return

        if user is None:
            show_error(self, "Error de ingreso", "Clave secreta invalida.")
            return

        self._secret_key_input.clear()
        self._on_logged_in(user)
