"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import os

API_BASE_URL = os.environ.get("STOCK_SCAN_API_URL", "http://localhost:3000").rstrip("/")
REQUEST_TIMEOUT_SECONDS = 10.0
CURRENCY_LABEL = "MAD"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/150"

# Umbrales para colorear cantidades en pantalla.
LOW_STOCK_THRESHOLD = 10
MEDIUM_STOCK_THRESHOLD = 20

# Ubicaciones de stock disponibles al crear un producto desde el escaner.
KNOWN_STOCK_LOCATIONS: tuple[dict[str, object], ...] = (
    {
        "id": "1999",
        "name": "Gueliz B2",
        "city": "Marrakesh",
        "latitude": 34.689404,
        "longitude": -1.912823,
    },
    {
        "id": "2991",
        "name": "Lazari H2",
        "city": "Oujda",
        "latitude": 34.689404,
        "longitude": -1.912823,
    },
)
DEFAULT_STOCK_LOCATION_ID = "1999"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
