"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura y el estado observable, y arranca
la interfaz gráfica principal.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from contador_usuarios import config
from contador_usuarios.core.state import UserCountViewModel
from contador_usuarios.infrastructure.api_client import APIClient
from contador_usuarios.infrastructure.repositories import UserCountRepository
from contador_usuarios.ui.main_window import MainWindow


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    logging.basicConfig(level=config.LOGLEVEL)

    app = QApplication(sys.argv)

    api_client = APIClient()
    repository = UserCountRepository(api_client)
    view_model = UserCountViewModel(repository)

    window = MainWindow(view_model=view_model)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
