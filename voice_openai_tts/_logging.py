import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger that stays silent by default.

    The logger uses Python's standard logging module and includes NullHandler
    by default to avoid unwanted output. Hosts can configure logging levels
    and handlers as needed.

    Args:
        name: Logger name, typically __name__ from the calling module.

    Returns:
        Configured logger instance.

    Examples:
        Basic usage in provider modules:
            logger = get_logger(__name__)
            logger.debug("HTTP request sent %s %s", method, url)
            logger.warning("Ignoring requested format %s", fmt)

        Enable debug logging in host code:
            import logging
            logging.basicConfig(level=logging.DEBUG)
            logging.getLogger('voice_openai_tts').setLevel(logging.DEBUG)
    """
    module_logger = logging.getLogger(name)
    module_logger.addHandler(logging.NullHandler())
    return module_logger


__all__ = ["get_logger"]
