"""Cliente HTTP del backend.

Encapsula las peticiones con ``urllib`` y traduce los fallos de transporte
y de decodificación a las excepciones de
:mod:`contador_usuarios.infrastructure.errors`.
"""

from __future__ import annotations

import http.client
import json
import socket
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from contador_usuarios import config
from contador_usuarios.infrastructure.errors import DecodeError, HTTPStatusError, NetworkError


class APIClient:
    """Realiza peticiones GET contra la API y devuelve el JSON decodificado."""

    def __init__(self, api_base: str = config.API_BASE, timeout: float = config.REQUEST_TIMEOUT) -> None:
        self.api_base = api_base
        self.timeout = timeout

    def url_para(self, path: str) -> str:
        return f"{self.api_base.rstrip('/')}/{path.lstrip('/')}"

    def obtener_json(self, path: str) -> Any:
        """Hace ``GET <api_base>/<path>`` y devuelve el cuerpo ya decodificado."""

        url = self.url_para(path)
        try:
            request = Request(url, headers={"Accept": "application/json"})
            with urlopen(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            exc.close()
            raise HTTPStatusError(exc.code, exc.reason or "") from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise NetworkError(f"La petición a {url} expiró por timeout.") from exc
            raise NetworkError(f"No se pudo conectar al servicio: {exc.reason}.") from exc
        except socket.timeout as exc:
            raise NetworkError(f"La petición a {url} expiró por timeout.") from exc
        except OSError as exc:
            raise NetworkError(f"Error de red al consultar {url}: {exc}") from exc
        except http.client.HTTPException as exc:
            # IncompleteRead, BadStatusLine, InvalidURL...
            raise NetworkError(f"Respuesta HTTP inválida de {url}: {exc!r}") from exc
        except ValueError as exc:
            raise NetworkError(f"URL inválida: {url} ({exc}).") from exc

        try:
            return json.loads(raw)
        except ValueError as exc:  # JSONDecodeError y UnicodeDecodeError
            raise DecodeError(f"Respuesta inválida del servicio ({exc}).") from exc


__all__ = ["APIClient"]
