"""Errores producidos al consultar el backend."""

from __future__ import annotations


class FetchError(Exception):
    """Error base de una consulta al backend."""


class NetworkError(FetchError):
    """Fallo de conectividad o de transporte (DNS, conexión, timeout)."""


class HTTPStatusError(NetworkError):
    """El servidor respondió con un código distinto de 2xx."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        super().__init__(f"HTTP {status_code} {reason}".strip())
        self.status_code = status_code
        self.reason = reason


class DecodeError(FetchError):
    """La respuesta no es JSON válido o no tiene la forma esperada."""


__all__ = ["DecodeError", "FetchError", "HTTPStatusError", "NetworkError"]
