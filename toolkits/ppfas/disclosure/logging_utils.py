"""Centralized logging helpers."""

import logging

LOGGER_NAME = "ppfas_disclosure"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
