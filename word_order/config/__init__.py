from .logging_config import configure_logging, get_logger
