import logging
import sys
from typing import Optional

import structlog

from infrastructure.config.settings import settings


def setup_logging(level: Optional[int] = None, force_json: Optional[bool] = None):
    """
    Configuração de structlog + logging padrão.
    Sem argumentos, usa LOG_LEVEL / LOG_FORCE_JSON das settings.
    """
    if level is None:
        level = settings.log_level_value()
    if force_json is None:
        force_json = settings.LOG_FORCE_JSON

    # 1. Processadores comuns para todos os loggers
    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # 2. Escolher renderizador final
    if not force_json and sys.stdout.isatty():
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    # 3. structlog entrega o event dict ao ProcessorFormatter
    structlog.configure(
        processors=common_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 4. Logging padrão renderiza tanto eventos structlog quanto de bibliotecas
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=common_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    # 5. Bibliotecas ruidosas
    for lib in ["pydantic", "dotenv"]:
        logging.getLogger(lib).setLevel(logging.WARNING)

    logger = structlog.get_logger(__name__)
    logger.debug("Logging configurado com sucesso", level=logging.getLevelName(level), json=force_json)
