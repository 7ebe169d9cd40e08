"""
Configuración del backend de logging (structlog sobre stdlib logging).

Salidas, por cada logger de la configuración:
1. Archivo (JSON), si ``file`` está configurado. Las rutas relativas cuelgan de data_dir.
2. Console (stderr), para ``root.console`` y para loggers que no propagan
   y tienen ``console: true``.

El filtrado por severidad lo hace el LevelGate antes de que el mensaje llegue
a structlog, así que todos los handlers aceptan todo hasta TRACE.
Un logger con archivo propio deja de propagar a las salidas del root
salvo que se configure ``propagate: true``.
"""

import logging
import sys
from pathlib import Path

import structlog

from ..config.schema import LoggerConfig, LoggingConfig
from ..core.store import INTERNAL_LOGGER
from .levels import TRACE

# Handlers instalados por el último configure_logging(), como (logger, handler)
_installed: list[tuple[logging.Logger, logging.Handler]] = []
# Loggers con nombre a los que se les cambió propagate
_configured: list[logging.Logger] = []


def configure_logging(
    config: LoggingConfig,
    data_dir: Path | None = None,
    quiet: bool = False,
    json_output: bool = False,
) -> None:
    """Configura los handlers de stdlib y structlog desde la sección ``logging``.

    Args:
        config: Configuración de logging (root + loggers con nombre)
        data_dir: Directorio base para rutas relativas (default: cwd)
        quiet: Si True, ninguna salida por consola
        json_output: Si True, la consola muestra líneas JSON
    """
    # Limpiar configuración anterior
    _reset_handlers()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

    # Root captura todo, el gate ya filtró
    logging.root.setLevel(TRACE)
    # Los diagnósticos propios de partlog solo salen si son problemas
    logging.getLogger(INTERNAL_LOGGER).setLevel(logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if config.timestamps:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    shared_processors.append(structlog.processors.StackInfoRenderer())

    file_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )
    console_renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    console_formatter = structlog.stdlib.ProcessorFormatter(
        processor=console_renderer,
        foreign_pre_chain=shared_processors,
    )

    base_dir = Path(data_dir) if data_dir is not None else Path(".")

    # ── Salidas del root ─────────────────────────────────────────────────
    added = _install_outputs(
        logging.root, config.root, base_dir, file_formatter,
        console_formatter if not quiet else None,
        console=config.root.console,
    )
    if not added:
        # Sin handlers, stdlib recurre a logging.lastResort (stderr)
        _add_handler(logging.root, logging.NullHandler())

    # ── Loggers con nombre ───────────────────────────────────────────────
    for name, logger_config in config.loggers.items():
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.setLevel(logging.NOTSET)
        propagate = logger_config.effective_propagate
        stdlib_logger.propagate = propagate
        _configured.append(stdlib_logger)
        added = _install_outputs(
            stdlib_logger, logger_config, base_dir, file_formatter,
            console_formatter if not quiet else None,
            # Los loggers que propagan ya llegan a la consola del root
            console=logger_config.console and not propagate,
        )
        if not added and not propagate:
            _add_handler(stdlib_logger, logging.NullHandler())

    structlog.configure(
        processors=shared_processors + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if config.peer_id:
        structlog.contextvars.bind_contextvars(peer_id=config.peer_id)


def _install_outputs(
    stdlib_logger: logging.Logger,
    logger_config: LoggerConfig,
    base_dir: Path,
    file_formatter: logging.Formatter,
    console_formatter: logging.Formatter | None,
    console: bool,
) -> bool:
    """Instala los handlers de archivo y consola de un logger.

    Returns:
        True si se instaló al menos un handler
    """
    added = False

    if logger_config.file:
        file_path = Path(logger_config.file)
        if not file_path.is_absolute():
            file_path = base_dir / file_path
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setLevel(TRACE)
        file_handler.setFormatter(file_formatter)
        _add_handler(stdlib_logger, file_handler)
        added = True

    if console and console_formatter is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(TRACE)
        console_handler.setFormatter(console_formatter)
        _add_handler(stdlib_logger, console_handler)
        added = True

    return added


def _add_handler(stdlib_logger: logging.Logger, handler: logging.Handler) -> None:
    stdlib_logger.addHandler(handler)
    _installed.append((stdlib_logger, handler))


def _reset_handlers() -> None:
    """Elimina todo lo que instaló un configure_logging() anterior."""
    for stdlib_logger, handler in _installed:
        stdlib_logger.removeHandler(handler)
        handler.close()
    _installed.clear()
    for stdlib_logger in _configured:
        stdlib_logger.propagate = True
    _configured.clear()
    logging.root.handlers.clear()


def rotate_logs() -> None:
    """Cierra los archivos de log para que se reabran con el siguiente registro.

    Pensado para ejecutarse después de que una herramienta externa
    (logrotate) haya movido los archivos.
    """
    for _, handler in _installed:
        if isinstance(handler, logging.FileHandler):
            handler.close()


def installed_files() -> list[Path]:
    """Rutas de los archivos de log configurados actualmente."""
    return [
        Path(handler.baseFilename)
        for _, handler in _installed
        if isinstance(handler, logging.FileHandler)
    ]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Obtiene un logger estructurado.

    Args:
        name: Nombre del logger (una partición o INTERNAL_LOGGER)

    Returns:
        Logger estructurado de structlog
    """
    return structlog.get_logger(name)
