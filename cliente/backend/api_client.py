"""Cliente HTTP minimo para el servidor JSON de catalogo."""

from __future__ import annotations

import logging
from typing import Any

import requests

from parametros import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from shared.errors import TransportError

LOGGER = logging.getLogger(__name__)


class ApiClient:
    """Envuelve una ``requests.Session`` con URL base, timeout y errores propios."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, json=payload)

    def patch(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("PATCH", path, json=payload)

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        LOGGER.debug("%s %s %s", method, url, kwargs.get("params") or "")

        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.Timeout as exc:
            raise TransportError(f"Tiempo de espera agotado: {method} {url}") from exc
        except requests.RequestException as exc:
            raise TransportError(f"No fue posible conectar con el servidor: {url}") from exc

        if response.status_code >= 400:
            raise TransportError(
                f"El servidor respondio {response.status_code} para {method} {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Respuesta no JSON para {method} {url}") from exc
