import logging

import pytest

from app.core.logging import configure_logging, resolve_level


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"ENVIRONMENT": "local", "LOG_LEVEL": None}, logging.INFO),
        ({"ENVIRONMENT": "dev", "LOG_LEVEL": None}, logging.INFO),
        ({"ENVIRONMENT": "prod", "LOG_LEVEL": None}, logging.WARNING),
        ({"ENVIRONMENT": "prod", "LOG_LEVEL": "debug"}, logging.DEBUG),
        ({"ENVIRONMENT": "local", "LOG_LEVEL": "nonsense"}, logging.INFO),
    ],
)
def test_resolve_level(make_settings, overrides, expected):
    assert resolve_level(make_settings(**overrides)) == expected


def test_configure_logging_aligns_server_and_quiets_clients(make_settings):
    level = configure_logging(make_settings(ENVIRONMENT="local", LOG_LEVEL="INFO"))

    assert level == logging.INFO
    assert logging.getLogger("uvicorn.error").level == logging.INFO
    assert logging.getLogger("uvicorn.access").level == logging.INFO
    assert logging.getLogger("google_genai").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_debug_lets_client_logs_through(make_settings):
    configure_logging(make_settings(LOG_LEVEL="DEBUG"))

    assert logging.getLogger("google_genai").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG
