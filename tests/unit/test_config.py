"""
tests/unit/test_config.py

Unit tests for the environment-driven Config.
"""

import logging

from stepgen.config import Config


class TestConfig:
    """Tests for Config.as_dict()."""

    def test_as_dict_holds_uppercase_settings(self) -> None:
        settings = Config.as_dict()
        assert {"LOG_LEVEL", "LOG_FORMAT", "LOG_DATE_FORMAT", "USE_TYPE_NAMES"} <= set(settings)
        assert all(key.isupper() for key in settings)

    def test_as_dict_values_match_attributes(self) -> None:
        settings = Config.as_dict()
        assert settings["USE_TYPE_NAMES"] is Config.USE_TYPE_NAMES
        assert isinstance(settings["LOG_LEVEL"], int)
        assert settings["LOG_LEVEL"] in logging.getLevelNamesMapping().values()
