"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from cliente.backend.api_client import ApiClient
from cliente.backend.controller import AppController
from cliente.backend.gateway import RestServerGateway
from cliente.frontend.main_window import MainWindow

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Ejecuta la aplicacion grafica."""
    app = QApplication(sys.argv)

    api_client = ApiClient()
    LOGGER.info("Servidor de catalogo: %s", api_client.base_url)

    gateway = RestServerGateway(api_client=api_client)
    controller = AppController(gateway=gateway)
    window = MainWindow(controller=controller)
    window.show()

    LOGGER.info("Aplicacion iniciada.")
    try:
        return app.exec()
    finally:
        api_client.close()


if __name__ == "__main__":
    sys.exit(main())
