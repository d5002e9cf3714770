"""Ventana principal de Stock Scan."""

from __future__ import annotations

from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QTabWidget

from cliente.backend.controller import AppController
from cliente.frontend.home_page import HomePage
from cliente.frontend.login_page import LoginPage
from cliente.frontend.products_page import ProductsPage
from cliente.frontend.profile_page import ProfilePage
from cliente.frontend.scan_page import ScanPage
from shared.protocol import Warehouseman


class MainWindow(QMainWindow):
    """Ventana con la pagina de ingreso y las pestañas de trabajo."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._stack: QStackedWidget
        self._login_page: LoginPage
        self._tabs: QTabWidget
        self._home_page: HomePage
        self._products_page: ProductsPage
        self._scan_page: ScanPage
        self._profile_page: ProfilePage

        self.setWindowTitle("Stock Scan")
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()
        w = int(geo.width() * 0.45)
        h = int(geo.height() * 0.85)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye la pagina de ingreso y las pestañas."""
        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._login_page = LoginPage(
            controller=self._controller,
            on_logged_in=self._on_logged_in,
            parent=self,
        )

        self._tabs = QTabWidget(self)
        self._home_page = HomePage(controller=self._controller, parent=self._tabs)
        self._products_page = ProductsPage(controller=self._controller, parent=self._tabs)
        self._scan_page = ScanPage(controller=self._controller, parent=self._tabs)
        self._profile_page = ProfilePage(
            controller=self._controller,
            on_logout=self._show_login_page,
            parent=self._tabs,
        )
        self._tabs.addTab(self._home_page, "Inicio")
        self._tabs.addTab(self._products_page, "Productos")
        self._tabs.addTab(self._scan_page, "Escanear")
        self._tabs.addTab(self._profile_page, "Perfil")
        self._tabs.currentChanged.connect(self._on_tab_changed)

        self._stack.addWidget(self._login_page)
        self._stack.addWidget(self._tabs)
        self._show_login_page()

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard, QFrame#productCard {
                background-color: #ffffff;
                border-radius: 18px;
            }
            QFrame#mainCard {
                min-width: 380px;
                max-width: 460px;
            }
            QLabel#titleLabel {
                color: #6200ee;
                font-family: "Segoe UI";
                font-size: 22px;
                font-weight: 700;
            }
            QLabel#sectionLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 17px;
                font-weight: 600;
            }
            QLabel#statNumber {
                font-family: "Segoe UI";
                font-size: 26px;
                font-weight: 700;
            }
            QLabel#errorLabel {
                color: #dc2626;
            }
            QFrame#statCard, QFrame#outOfStockCard, QFrame#valueCard {
                border-radius: 12px;
            }
            QFrame#statCard {
                background-color: #ffffff;
            }
            QFrame#outOfStockCard {
                background-color: #FF3B30;
                color: #ffffff;
            }
            QFrame#valueCard {
                background-color: #4CD964;
                color: #ffffff;
            }
            QLineEdit, QComboBox, QSpinBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QPushButton {
                background-color: #6200ee;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
                min-height: 40px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #4b00b8;
            }
            QPushButton:checked {
                background-color: #3700b3;
            }
            QPushButton:disabled {
                background-color: #c4b5fd;
                color: #f5f3ff;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _show_login_page(self) -> None:
        """Muestra la pagina de ingreso."""
        self._login_page.reset()
        self._stack.setCurrentWidget(self._login_page)

    def _on_logged_in(self, _user: Warehouseman) -> None:
        """Pasa a las pestañas y carga la pagina de inicio."""
        self._stack.setCurrentWidget(self._tabs)
        if self._tabs.currentIndex() == 0:
            self._home_page.refresh()
        else:
            self._tabs.setCurrentIndex(0)

    def _on_tab_changed(self, index: int) -> None:
        """Cada pestaña vuelve a pedir sus datos al mostrarse."""
        page = self._tabs.widget(index)
        if page is self._home_page:
            self._home_page.refresh()
        elif page is self._products_page:
            self._products_page.refresh()
        elif page is self._scan_page:
            self._scan_page.reset()
        elif page is self._profile_page:
            self._profile_page.refresh()
