import pytest

from shared.helper.HelperConfig import HelperConfig


class TestHelperConfig:
    def test_string_val(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_KEY", "  value ")

        assert helper_config.get_string_val("some_key") == "value"

    def test_empty_string_counts_as_unset(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_KEY", "")

        assert helper_config.get_string_val("SOME_KEY", default="fallback") == "fallback"
        with pytest.raises(ValueError, match="SOME_KEY"):
            helper_config.get_string_val("SOME_KEY")

    def test_number_val(self, helper_config, monkeypatch):
        monkeypatch.setenv("WHOLE", "30")
        monkeypatch.setenv("FRACTION", "2.5")
        monkeypatch.setenv("BROKEN", "thirty")

        assert helper_config.get_number_val("WHOLE") == 30
        assert isinstance(helper_config.get_number_val("WHOLE"), int)
        assert helper_config.get_number_val("FRACTION") == 2.5
        assert helper_config.get_number_val("MISSING", default=1) == 1
        with pytest.raises(ValueError, match="not a valid number"):
            helper_config.get_number_val("BROKEN")

    def test_list_val(self, helper_config, monkeypatch):
        monkeypatch.setenv("ORIGINS", "[http://a.test, http://b.test,]")

        assert helper_config.get_list_val("ORIGINS") == ["http://a.test", "http://b.test"]

    def test_list_val_requires_brackets(self, helper_config, monkeypatch):
        monkeypatch.setenv("ORIGINS", "http://a.test")

        with pytest.raises(ValueError, match="format"):
            helper_config.get_list_val("ORIGINS")

    def test_api_base_url(self, helper_config, monkeypatch):
        monkeypatch.delenv("API_BASE_URL")
        assert helper_config.get_api_base_url() == "http://localhost:8080"

        monkeypatch.setenv("API_BASE_URL", "https://ats.example.com/")
        assert helper_config.get_api_base_url() == "https://ats.example.com"

    def test_cors_origins_default(self, helper_config):
        assert helper_config.get_cors_origins() == ["*"]

    def test_get_logger(self):
        import logging

        logger = logging.getLogger("x")
        assert HelperConfig(logger=logger).get_logger() is logger
