import pytest

from expression_equivalence import reset_config, configure_logging, LogLevel


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from the default settings and quiet logging"""
    reset_config()
    configure_logging(LogLevel.MINIMAL)
    yield
    reset_config()
    configure_logging(LogLevel.MINIMAL)
