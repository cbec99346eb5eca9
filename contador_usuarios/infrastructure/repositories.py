"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

import logging

from contador_usuarios import config
from contador_usuarios.infrastructure.api_client import APIClient
from contador_usuarios.models.user_count import UserCountResponse

logger = logging.getLogger(__name__)


class UserCountRepository:
    """Obtiene el total de usuarios a través del cliente API."""

    def __init__(self, api_client: APIClient, path: str = config.TOTAL_USERS_PATH) -> None:
        self._api_client = api_client
        self._path = path

    def fetch(self) -> UserCountResponse:
        """Consulta el endpoint una sola vez, sin reintentos.

        Lanza ``NetworkError`` ante fallos de transporte y ``DecodeError``
        si el cuerpo no tiene la forma esperada.
        """

        logger.debug("Making API call...")
        respuesta = UserCountResponse.from_json(self._api_client.obtener_json(self._path))
        logger.debug("Response received: %s", respuesta.total_users)
        return respuesta


__all__ = ["UserCountRepository"]
