"""Unit tests for config.py — environment-driven settings.

Only the env-var override path and the parsing of optional values are
tested; plain defaults would just test os.getenv.
"""

import importlib
import os
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.unit


def _reloaded(env):
    from graham_hull import config
    with patch.dict(os.environ, env):
        importlib.reload(config)
        reloaded = config.Config
    importlib.reload(config)
    return reloaded


class TestConfig:
    def test_max_coordinate_int(self):
        assert _reloaded({"HULL_MAX_COORDINATE": "1000"}).MAX_COORDINATE == 1000

    def test_max_coordinate_float(self):
        assert _reloaded({"HULL_MAX_COORDINATE": "2.5"}).MAX_COORDINATE == 2.5

    def test_max_coordinate_blank_is_unbounded(self):
        assert _reloaded({"HULL_MAX_COORDINATE": " "}).MAX_COORDINATE is None

    def test_log_level_override(self):
        assert _reloaded({"HULL_LOG_LEVEL": "DEBUG"}).LOG_LEVEL == "DEBUG"

    def test_getitem(self):
        from graham_hull.config import Config
        c = Config()
        assert c["OUTPUT_FORMAT"] == Config.OUTPUT_FORMAT
