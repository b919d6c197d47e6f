"""Sistema de logging para el motor de métricas."""
import logging
import os
import sys

PACKAGE_LOGGER = 'graph_metrics'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def _default_level() -> int:
    """Nivel desde GRAPH_METRICS_LOG_LEVEL (nombre o número); INFO si no es válido."""
    value = os.environ.get('GRAPH_METRICS_LOG_LEVEL', 'INFO').strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Configura y retorna un logger.

    Args:
        name: Nombre del logger (usualmente __name__ del módulo)
        level: Nivel de logging; por defecto el de GRAPH_METRICS_LOG_LEVEL

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


def set_level(level: int):
    """Cambia el nivel de todos los loggers ya creados del paquete (p. ej. --verbose en CLI)."""
    for name in list(logging.Logger.manager.loggerDict):
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
