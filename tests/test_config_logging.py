import logging

import pytest

from expression_equivalence import (
  leaf, MUL, EquivalenceConfig, get_config, set_config, reset_config,
  LogLevel, configure_logging, get_logger, set_log_level, is_equivalent
)
from expression_equivalence.expression_tree import float_equals


def test_default_config():
    config = get_config()
    assert config.epsilon == 1e-9
    assert config.exempt_originals == (1.0, -1.0)
    assert get_config() is config


def test_epsilon_drives_comparator_and_identity():
    assert not float_equals(1.0, 1.05)
    assert not is_equivalent(leaf(1.05).apply(MUL, 3), leaf(3))

    set_config(epsilon=0.1)
    assert float_equals(1.0, 1.05)
    assert is_equivalent(leaf(1.05).apply(MUL, 3), leaf(3))

    reset_config()
    assert get_config().epsilon == 1e-9


def test_set_full_config():
    config = EquivalenceConfig(epsilon=1e-6, exempt_originals=(1.0,))
    assert set_config(config) is config
    assert get_config() is config


def test_negative_epsilon_rejected():
    with pytest.raises(ValueError):
        EquivalenceConfig(epsilon=-1.0)


def test_normalization_logged_when_verbose(caplog):
    configure_logging(LogLevel.VERBOSE)
    with caplog.at_level(logging.DEBUG, logger='expression_equivalence'):
        leaf(5).apply(MUL, 2).normalized()
    assert "Normalized '(5 * 2)' to '(2 * 5)'" in caplog.text


def test_silent_logging(caplog):
    set_log_level(LogLevel.SILENT)
    assert get_logger().log_level is LogLevel.SILENT
    with caplog.at_level(logging.DEBUG, logger='expression_equivalence'):
        leaf(5).apply(MUL, 2).normalized()
        get_logger().warning("hidden")
    assert caplog.text == ''
