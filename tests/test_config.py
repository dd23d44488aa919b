import logging

from portfolio_api.app.core.config import Settings
from portfolio_api.app.core.logging_config import SERVICE_LOGGERS, setup_logging


def test_cors_origin_list_splits_and_strips():
    settings = Settings(cors_origins="http://localhost:4200, https://app.example.com ,")
    assert settings.cors_origin_list() == ["http://localhost:4200", "https://app.example.com"]


def test_default_ports_differ():
    settings = Settings()
    assert settings.planner_port != settings.portfolio_port


def test_setup_logging_does_not_duplicate_handlers():
    root = logging.getLogger()
    setup_logging("DEBUG")
    count = len(root.handlers)
    setup_logging("DEBUG")
    assert len(root.handlers) == count


def test_setup_logging_applies_level_to_uvicorn_loggers():
    previous = {name: logging.getLogger(name).level for name in SERVICE_LOGGERS}
    try:
        setup_logging("WARNING")
        access = logging.getLogger("uvicorn.access")
        assert access.level == logging.WARNING
        assert access.propagate is True
        assert logging.getLogger("portfolio_api").level == logging.WARNING
    finally:
        for name, level in previous.items():
            logging.getLogger(name).setLevel(level)
