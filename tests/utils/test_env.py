"""Tests for environment helper utilities."""

import importlib

import pytest


def _fresh_env_module():
    # Reload module to clear lru_cache
    import utils.env
    return importlib.reload(utils.env)


class TestIsDevMode:
    """Tests for is_dev_mode function."""

    def test_returns_false_when_no_env_vars(self, monkeypatch):
        """Should return False when no environment variables are set."""
        monkeypatch.delenv("SPESTI_ENV", raising=False)
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is False

    @pytest.mark.parametrize("value", ["dev", "development", "1", "true", "yes"])
    def test_returns_true_for_dev_values_spesti_env(self, monkeypatch, value):
        """Should return True for various dev values in SPESTI_ENV."""
        monkeypatch.setenv("SPESTI_ENV", value)
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["1", "true", "yes", "on"])
    def test_returns_true_for_dev_mode_flag(self, monkeypatch, value):
        """Should return True for truthy values in SPESTI_DEV_MODE."""
        monkeypatch.delenv("SPESTI_ENV", raising=False)
        monkeypatch.setenv("SPESTI_DEV_MODE", value)

        assert _fresh_env_module().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["DEV", "Development", "TRUE", "Yes"])
    def test_case_insensitive(self, monkeypatch, value):
        """Should be case-insensitive."""
        monkeypatch.setenv("SPESTI_ENV", value)
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is True

    @pytest.mark.parametrize("value", ["prod", "production", "0", "false", "no", "staging"])
    def test_returns_false_for_non_dev_values(self, monkeypatch, value):
        """Should return False for non-dev values."""
        monkeypatch.setenv("SPESTI_ENV", value)
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is False

    def test_handles_whitespace(self, monkeypatch):
        """Should handle values with whitespace."""
        monkeypatch.setenv("SPESTI_ENV", "  dev  ")
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is True

    def test_empty_string_returns_false(self, monkeypatch):
        """Should return False for empty string."""
        monkeypatch.setenv("SPESTI_ENV", "")
        monkeypatch.delenv("SPESTI_DEV_MODE", raising=False)

        assert _fresh_env_module().is_dev_mode() is False


class TestIsProForced:
    """Tests for the SPESTI_ENABLE_PRO override."""

    def test_off_by_default(self, monkeypatch):
        monkeypatch.delenv("SPESTI_ENABLE_PRO", raising=False)
        assert _fresh_env_module().is_pro_forced() is False

    @pytest.mark.parametrize("value", ["1", "true", "ON"])
    def test_truthy_values_force_pro(self, monkeypatch, value):
        monkeypatch.setenv("SPESTI_ENABLE_PRO", value)
        assert _fresh_env_module().is_pro_forced() is True

    @pytest.mark.parametrize("value", ["0", "false", "pro"])
    def test_other_values_do_not(self, monkeypatch, value):
        monkeypatch.setenv("SPESTI_ENABLE_PRO", value)
        assert _fresh_env_module().is_pro_forced() is False
