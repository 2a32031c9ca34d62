"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from hostaway_occupancy.config import Settings


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


class TestListingIds:
    def test_comma_separated_ids_are_trimmed(self):
        settings = _settings(hostaway_listing_ids=" 42, 77 ,,108 ,")
        assert settings.listing_ids == ["42", "77", "108"]

    def test_missing_ids(self):
        assert _settings(hostaway_listing_ids="").listing_ids == []

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("HOSTAWAY_LISTING_IDS", "1,2")
        monkeypatch.setenv("HOSTAWAY_ACCOUNT_ID", "acct")
        monkeypatch.setenv("NOTION_DATABASE_ID", "db-123")

        settings = Settings(_env_file=None)

        assert settings.listing_ids == ["1", "2"]
        assert settings.hostaway_account_id == "acct"
        assert settings.notion_database_id == "db-123"


class TestDefaults:
    def test_reference_configuration(self, monkeypatch):
        for name in ("MONTHS_TO_REPORT", "HOSTAWAY_BASE_URL", "HOSTAWAY_RESERVATIONS_LIMIT"):
            monkeypatch.delenv(name, raising=False)

        settings = _settings()

        assert settings.months_to_report == 6
        assert settings.hostaway_base_url == "https://api.hostaway.com/v1"
        assert settings.hostaway_reservations_limit == 300

    def test_base_url_trailing_slash_stripped(self):
        assert _settings(hostaway_base_url="https://api.example.com/v1/").hostaway_base_url == (
            "https://api.example.com/v1"
        )

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValidationError):
            _settings(months_to_report=-1)
