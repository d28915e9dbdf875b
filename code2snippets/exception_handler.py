import logging


class SnippetError(Exception):
    """Base class for failures while converting files to snippets."""


class CollectionError(SnippetError):
    """An input path could not be walked or one of its files could not be read."""


class WriteError(SnippetError):
    """The output directory or a snippet file could not be created or encoded."""


class ErrorHandler:
    """Centralized error reporting and logging setup for the converter."""

    def __init__(self, log_level: str = "WARNING"):
        self.logger = self._setup_logging(log_level)

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure the package logger to write to stderr."""
        logger = logging.getLogger("code2snippets")
        logger.setLevel(getattr(logging, level.upper()))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def handle_error(self, error: BaseException) -> str:
        """Log ``error`` and return the single line shown to the user."""
        message = format_error(error)
        self.logger.debug("%s: %s", type(error).__name__, message, exc_info=error)
        return message


def format_error(error: BaseException) -> str:
    """Collapse an exception message onto one line."""
    message = str(error) or type(error).__name__
    return " ".join(message.splitlines())
