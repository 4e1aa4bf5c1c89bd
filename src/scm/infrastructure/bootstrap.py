"""Composition root — configuration and wiring of the application handlers.

This is the only place in the codebase that reads the environment or
touches logging configuration. Every other module receives what it
needs through constructor arguments.
"""

from __future__ import annotations

import logging
import os

from scm.application.register_supplier import RegisterSupplierHandler
from scm.application.total_amounts import TotalAmountsHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def default_currency() -> str:
    return os.getenv("SCM_DEFAULT_CURRENCY", "USD")


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.getenv("SCM_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=log_level(verbose), format=LOG_FORMAT, force=True)


def register_supplier_handler() -> RegisterSupplierHandler:
    return RegisterSupplierHandler(default_currency=default_currency())


def total_amounts_handler() -> TotalAmountsHandler:
    return TotalAmountsHandler(default_currency=default_currency())
