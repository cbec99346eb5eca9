"""Modelo de la respuesta del endpoint de total de usuarios."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contador_usuarios.infrastructure.errors import DecodeError


@dataclass(frozen=True, slots=True)
class UserCountResponse:
    """Respuesta de ``GET /totalUser``.

    Attributes
    ----------
    status:
        Texto de estado devuelto por el servidor (por ejemplo ``"ok"``).
    total_users:
        Cantidad total de usuarios registrados.

    Los campos ausentes (o ``null``) toman su valor por defecto en lugar de
    producir un error; solo un tipo incorrecto se considera inválido.
    """

    status: str = ""
    total_users: int = 0

    @classmethod
    def from_json(cls, payload: Any) -> UserCountResponse:
        """Construye la respuesta a partir del JSON ya decodificado."""

        if not isinstance(payload, dict):
            raise DecodeError(
                f"Formato inesperado: se esperaba un objeto JSON, se recibió {type(payload).__name__}."
            )

        status = payload.get("status")
        if status is None:
            status = ""
        elif not isinstance(status, str):
            raise DecodeError(f"Campo 'status' inválido: {status!r}")

        total = payload.get("total_users")
        if total is None:
            total = 0
        elif isinstance(total, bool) or not isinstance(total, int):
            raise DecodeError(f"Campo 'total_users' inválido: {total!r}")

        return cls(status=status, total_users=total)


__all__ = ["UserCountResponse"]
