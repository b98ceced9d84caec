"""Utilities related to logging."""

import io
import logging
from contextvars import ContextVar
from importlib import resources
from logging.config import fileConfig
from typing import Mapping

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOGGING_CONFIG_PATH_INI = "partner_agent.config:default_logging_config.ini"
LOG_FORMAT_FILE_PATTERN = (
    "%(asctime)s %(partner_did)s %(levelname)s %(pathname)s:%(lineno)d %(message)s"
)

context_partner_did: ContextVar[str] = ContextVar("context_partner_did")


class ContextFilter(logging.Filter):
    """Logging filter adding the DID of the partner currently being looked up."""

    def filter(self, record):
        """Filter LogRecords and add the partner DID to them."""
        record.partner_did = context_partner_did.get(None)
        return True


def load_resource(path: str, encoding: str = None):
    """Open a resource file located in a python package or the local filesystem.

    Args:
        path: The resource path in the form of `dir/file` or `package:dir/file`
    Returns:
        A file-like object representing the resource, or None if it is missing
    """
    components = path.rsplit(":", 1)
    try:
        if len(components) == 1:
            return open(components[0], encoding=encoding)
        else:
            package, resource = components
            bstream = resources.files(package).joinpath(resource).open("rb")
            if encoding:
                return io.TextIOWrapper(bstream, encoding=encoding)
            return bstream
    except IOError:
        return None


class LoggingConfigurator:
    """Utility class used to configure logging."""

    default_config_path_ini = DEFAULT_LOGGING_CONFIG_PATH_INI

    @classmethod
    def configure(
        cls,
        log_config_path: str = None,
        log_level: str = None,
        log_file: str = None,
        log_json: bool = False,
    ):
        """Configure logger.

        :param log_config_path: str: (Default value = None) Optional path to
            custom logging config

        :param log_level: str: (Default value = None)

        :param log_file: str: (Default value = None) Optional file name to write logs to

        :param log_json: bool: (Default value = False) Write the log file as JSON lines
        """
        config_path = log_config_path or cls.default_config_path_ini
        log_config = load_resource(config_path, "utf-8")
        if not log_config:
            raise FileNotFoundError(f"Logging config {config_path} could not be loaded")
        with log_config:
            fileConfig(log_config, disable_existing_loggers=False)

        log_filter = ContextFilter()
        for handler in logging.root.handlers:
            handler.addFilter(log_filter)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.addFilter(log_filter)
            if log_json:
                file_handler.setFormatter(
                    JsonFormatter(LOG_FORMAT_FILE_PATTERN)
                )
            else:
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE_PATTERN))
            logging.root.addHandler(file_handler)

        if log_level:
            logging.root.setLevel(log_level.upper())

    @classmethod
    def configure_from_settings(cls, settings: Mapping[str, object]):
        """Configure logging from the `log.*` settings keys."""
        cls.configure(
            log_config_path=settings.get("log.config"),
            log_level=settings.get("log.level"),
            log_file=settings.get("log.file"),
            log_json=bool(settings.get("log.json")),
        )
