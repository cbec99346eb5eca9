"""Constantes de configuración de la aplicación."""

import logging

LOGLEVEL = logging.DEBUG

API_BASE = "https://staging.taplerr.com/api/"
TOTAL_USERS_PATH = "totalUser"
REQUEST_TIMEOUT = 10  # segundos

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
WINDOW_TITLE = "Total de usuarios"
