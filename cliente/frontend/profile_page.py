"""Pagina de perfil del operador."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QFormLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from cliente.frontend.dialogs import ask_confirmation
from shared.errors import ServiceError, ValidationError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class ProfilePage(QWidget):
    """Datos del operador en sesion y cierre de sesion."""

    def __init__(
        self,
        controller: AppController,
        on_logout: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._on_logout = on_logout
        self._build_ui()

    def refresh(self) -> None:
        """Recarga el operador desde el servidor."""
        self._error_label.clear()
        try:
            user = self._controller.load_current_user()
        except (ValidationError, ServiceError):
            self._error_label.setText("No fue posible cargar el usuario.")
            return

        if user is None:
            self._error_label.setText("Usuario no encontrado.")
            return

        self._name_label.setText(user.name)
        self._city_label.setText(user.city)
        self._dob_label.setText(user.dob)
        self._warehouse_label.setText(str(user.warehouse_id or ""))

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(32, 32, 32, 32)

        form_layout = QFormLayout()
        self._name_label = QLabel(self)
        self._city_label = QLabel(self)
        self._dob_label = QLabel(self)
        self._warehouse_label = QLabel(self)
        form_layout.addRow("Nombre:", self._name_label)
        form_layout.addRow("Ciudad:", self._city_label)
        form_layout.addRow("Fecha de nacimiento:", self._dob_label)
        form_layout.addRow("Bodega:", self._warehouse_label)

        self._error_label = QLabel(self)
        self._error_label.setObjectName("errorLabel")

        retry_button = QPushButton("Reintentar", self)
        retry_button.clicked.connect(self.refresh)
        logout_button = QPushButton("Cerrar sesion", self)
        logout_button.setObjectName("exitButton")
        logout_button.clicked.connect(self._on_logout_clicked)

        root_layout.addLayout(form_layout)
        root_layout.addWidget(self._error_label)
        root_layout.addStretch(1)
        root_layout.addWidget(retry_button)
        root_layout.addWidget(logout_button)

    def _on_logout_clicked(self, _checked: bool = False) -> None:
        if ask_confirmation(self, "Cerrar sesion", "¿Seguro que quieres cerrar sesion?"):
            self._controller.logout()
            self._on_logout()
