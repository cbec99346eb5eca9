"""Ventana principal de la aplicación."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from contador_usuarios import config
from contador_usuarios.core.state import Pantalla, UserCountViewModel


class MainWindow(QMainWindow):
    """Muestra el total de usuarios con sus estados de carga y error."""

    ERROR_STYLE = "color: #b3261e;"

    def __init__(self, *, view_model: UserCountViewModel) -> None:
        super().__init__()
        self.view_model = view_model

        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(360, 240)

        self.progress = QProgressBar()
        self.progress.setRange(0, 0)  # indeterminada
        self.progress.setTextVisible(False)

        self.lbl_cargando = QLabel("Loading...")
        self.lbl_cargando.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.lbl_error = QLabel()
        self.lbl_error.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setStyleSheet(self.ERROR_STYLE)

        self.btn_retry = QPushButton("Retry")
        self.btn_retry.clicked.connect(self._on_refresh)

        self.lbl_total = QLabel()
        self.lbl_total.setAlignment(Qt.AlignmentFlag.AlignCenter)
        headline = QFont(self.lbl_total.font())
        headline.setPointSize(headline.pointSize() + 8)
        self.lbl_total.setFont(headline)

        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.clicked.connect(self._on_refresh)

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addStretch(1)
        for widget in (
            self.progress,
            self.lbl_cargando,
            self.lbl_error,
            self.btn_retry,
            self.lbl_total,
            self.btn_refresh,
        ):
            layout.addWidget(widget, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        # La señal puede emitirse desde el hilo del ejecutor; la conexión
        # automática la entrega en el hilo de la interfaz.
        self.view_model.cambiado.connect(self._render)
        self._render()
        self._on_refresh()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _on_refresh(self) -> None:
        if self.view_model.cerrado:
            return
        self.view_model.refresh()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - API de Qt
        if not self.view_model.cerrado:
            self.view_model.cambiado.disconnect(self._render)
            self.view_model.close()
        super().closeEvent(event)

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _render(self) -> None:
        pantalla = self.view_model.pantalla

        self.progress.setVisible(pantalla in (Pantalla.PENDIENTE, Pantalla.CARGANDO))
        self.lbl_cargando.setVisible(pantalla is Pantalla.CARGANDO)

        self.lbl_error.setVisible(pantalla is Pantalla.ERROR)
        self.btn_retry.setVisible(pantalla is Pantalla.ERROR)
        if pantalla is Pantalla.ERROR:
            self.lbl_error.setText(f"Error: {self.view_model.error}")

        self.lbl_total.setVisible(pantalla is Pantalla.EXITO)
        self.btn_refresh.setVisible(pantalla is Pantalla.EXITO)
        if pantalla is Pantalla.EXITO:
            self.lbl_total.setText(f"Total Users: {self.view_model.total_users}")


__all__ = ["MainWindow"]
