"""Estado observable de la pantalla de total de usuarios."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum
from typing import Optional, Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from contador_usuarios import config
from contador_usuarios.models.user_count import UserCountResponse

logger = logging.getLogger(__name__)


class Pantalla(Enum):
    """Variantes mutuamente excluyentes que muestra la interfaz."""

    PENDIENTE = "pendiente"
    CARGANDO = "cargando"
    ERROR = "error"
    EXITO = "exito"


def resolver_pantalla(is_loading: bool, error: Optional[str], total_users: Optional[int]) -> Pantalla:
    if is_loading:
        return Pantalla.CARGANDO
    if error is not None:
        return Pantalla.ERROR
    if total_users is not None:
        return Pantalla.EXITO
    return Pantalla.PENDIENTE


class UserCountFetcher(Protocol):
    def fetch(self) -> UserCountResponse: ...


class UserCountViewModel(QObject):
    """Mantiene ``is_loading``, ``error`` y ``total_users``.

    Cada escritura emite ``cambiado``; los observadores leen las
    propiedades al recibir la señal. ``refresh()`` ejecuta la consulta en un
    hilo del ejecutor, por lo que las señales pueden llegar desde ese hilo:
    los widgets deben conectarse con la conexión automática de Qt, que las
    encola hacia el hilo de la interfaz.
    """

    cambiado = pyqtSignal()

    def __init__(
        self,
        fetcher: UserCountFetcher,
        *,
        executor: Executor | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._fetcher = fetcher
        self._executor = executor or ThreadPoolExecutor(thread_name_prefix="total-usuarios")
        self._is_loading = False
        self._error: str | None = None
        self._total_users: int | None = None
        self._cerrado = False
        # Serializa el cierre con las escrituras de los hilos del ejecutor.
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Propiedades observables
    # ------------------------------------------------------------------
    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def total_users(self) -> int | None:
        return self._total_users

    @property
    def pantalla(self) -> Pantalla:
        return resolver_pantalla(self._is_loading, self._error, self._total_users)

    @property
    def cerrado(self) -> bool:
        return self._cerrado

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------
    def refresh(self) -> Future:
        """Inicia un ciclo de consulta y devuelve su ``Future``.

        No hay cola: dos llamadas seguidas corren en paralelo y la última en
        terminar es la que queda reflejada en el estado.
        """

        if self._cerrado:
            raise RuntimeError("El estado ya fue cerrado; no se puede refrescar.")

        self._is_loading = True
        self._error = None
        self.cambiado.emit()

        try:
            future = self._executor.submit(self._consultar)
        except RuntimeError:
            # El ejecutor ya no acepta tareas.
            self._finalizar_carga()
            raise
        future.add_done_callback(self._on_ciclo_terminado)
        return future

    def close(self) -> None:
        """Libera el ejecutor; los resultados en vuelo se descartan."""

        with self._lock:
            if self._cerrado:
                return
            self._cerrado = True
        self._executor.shutdown(wait=False, cancel_futures=True)

    # ------------------------------------------------------------------
    # Ciclo de consulta
    # ------------------------------------------------------------------
    def _consultar(self) -> None:
        try:
            respuesta = self._fetcher.fetch()
        except Exception as exc:
            with self._lock:
                descartar = self._cerrado
                if not descartar:
                    self._error = str(exc) or config.UNKNOWN_ERROR_MESSAGE
            if descartar:
                logger.debug("Error descartado tras el cierre: %s", exc)
            else:
                logger.exception("Error: %s", exc)
                self.cambiado.emit()
        else:
            with self._lock:
                descartar = self._cerrado
                if not descartar:
                    self._total_users = respuesta.total_users
            if descartar:
                logger.debug("Respuesta descartada tras el cierre: %s", respuesta.total_users)
            else:
                self.cambiado.emit()
        finally:
            self._finalizar_carga()

    def _on_ciclo_terminado(self, future: Future) -> None:
        # Un ciclo cancelado antes de empezar nunca pasa por _consultar.
        if future.cancelled():
            self._finalizar_carga()

    def _finalizar_carga(self) -> None:
        self._is_loading = False
        self.cambiado.emit()


__all__ = ["Pantalla", "UserCountFetcher", "UserCountViewModel", "resolver_pantalla"]
