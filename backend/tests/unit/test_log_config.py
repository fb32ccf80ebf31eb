"""Unit tests for the per-category logging setup."""

import logging

from fruit_shop.config import Settings
from fruit_shop.infrastructure.logging.log_config import _parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_accounts="DEBUG",
        log_level_orders="ERROR",
        log_level_storage="nonsense",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("fruit_shop.application.services.account_directory").level == logging.DEBUG
    assert logging.getLogger("fruit_shop.application.services.order_ledger").level == logging.ERROR
    assert logging.getLogger("fruit_shop.application.services.order_progress").level == logging.ERROR
    assert logging.getLogger("fruit_shop.infrastructure.storage").level == logging.INFO


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("LOUD") == logging.INFO
