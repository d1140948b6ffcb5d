"""Sistema de logging para los motores y la API."""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def _default_level() -> int:
    """Nivel tomado de GRAFOS_LOG_LEVEL (INFO si no existe o no es válido)."""
    level = logging.getLevelName(os.environ.get('GRAFOS_LOG_LEVEL', 'INFO').upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Configura y retorna un logger con salida a consola.

    Args:
        name: Nombre del logger (usualmente __name__ del módulo)
        level: Nivel de logging; por defecto el de GRAFOS_LOG_LEVEL

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)

    # Evitar duplicación de handlers
    if logger.handlers:
        return logger

    level = _default_level() if level is None else level
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Obtiene un logger configurado."""
    return setup_logger(name)
