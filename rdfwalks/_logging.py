"""Centralized logging configuration for rdfwalks."""

import logging

PACKAGE_LOGGER_NAME: str = "rdfwalks"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``rdfwalks``.

    Every module logs through a child of the ``rdfwalks`` logger, so
    callers configure handlers and levels for the whole package via
    ``logging.getLogger("rdfwalks")``. No handler is installed here.

    Parameters
    ----------
    name : str
        Module name, typically passed as ``__name__``.

    Returns
    -------
    logging.Logger
        Logger named ``rdfwalks.<module>``.
    """
    short_name = name.rsplit(".", maxsplit=1)[-1]
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{short_name}")
