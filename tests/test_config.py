"""
Unit Tests for Engine Configuration

Tests for EngineConfig defaults, coercion and validation.
"""

from pathlib import Path

import pytest

from connect4_engine.config import DEFAULT_LOG_FILE, EngineConfig
from connect4_engine.exceptions import InvalidDepthError
from connect4_engine.search import Algorithm


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.algorithm == Algorithm.ALPHA_BETA
        assert config.depth == 5
        assert config.tt_max_size is None
        assert config.log_file == DEFAULT_LOG_FILE
        assert config.debug is True

    def test_algorithm_string_is_coerced(self):
        config = EngineConfig(algorithm="mtdf")
        assert config.algorithm is Algorithm.MTDF

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(ValueError):
            EngineConfig(algorithm="negamax")

    @pytest.mark.parametrize("depth", [0, -2])
    def test_invalid_depth_rejected(self, depth):
        with pytest.raises(InvalidDepthError):
            EngineConfig(depth=depth)

    def test_invalid_table_size_rejected(self):
        with pytest.raises(ValueError):
            EngineConfig(tt_max_size=0)

    def test_log_file_string_becomes_path(self, tmp_path):
        config = EngineConfig(log_file=str(tmp_path / "engine.log"))

        assert isinstance(config.log_file, Path)
        assert config.log_file == tmp_path / "engine.log"

    def test_log_file_can_be_disabled(self):
        assert EngineConfig(log_file=None).log_file is None

    def test_repr(self):
        text = repr(EngineConfig(algorithm="transposition", depth=7))

        assert "algorithm=transposition" in text
        assert "depth=7" in text
