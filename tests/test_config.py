"""Tests for Config validation"""
import pytest

from git_prompt_status.config import Config


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = Config()
        assert config.start_dir == "."
        assert config.metadata_dir_name == ".git"
        assert config.input_mode == "auto"
        assert config.git_timeout == 10.0
        assert config.verbose is False
        assert config.debug is False

    @pytest.mark.parametrize("mode", ["auto", "stdin", "git"])
    def test_valid_input_modes(self, mode):
        assert Config(input_mode=mode).input_mode == mode

    def test_invalid_input_mode(self):
        with pytest.raises(ValueError, match="input_mode"):
            Config(input_mode="socket")

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValueError, match="git_timeout"):
            Config(git_timeout=timeout)

    def test_empty_start_dir(self):
        with pytest.raises(ValueError, match="start_dir"):
            Config(start_dir="  ")

    def test_path_like_start_dir(self, temp_dir):
        assert Config(start_dir=temp_dir).start_dir == str(temp_dir)

    @pytest.mark.parametrize("name", ["", "a/.git"])
    def test_invalid_metadata_dir_name(self, name):
        with pytest.raises(ValueError, match="metadata_dir_name"):
            Config(metadata_dir_name=name)

    def test_get(self):
        config = Config(input_mode="git")
        assert config.get("input_mode") == "git"
        assert config.get("missing", "fallback") == "fallback"

    def test_round_trip_through_dict(self, mock_config):
        config = Config.from_dict({**mock_config, "unknown_key": 1})
        assert config.to_dict() == mock_config
