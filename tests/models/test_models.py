# tests/models/test_models.py

import pytest
from pydantic import ValidationError

from cloudaccounts.models.account import Account
from cloudaccounts.models.settings import ApplicationContext, ProviderSettings

DETAIL_PAYLOAD = {
    "name": "prod",
    "type": "aws",
    "accountId": "123456789012",
    "challengeDestructiveActions": True,
    "regions": [
        {"name": "us-east-1", "availabilityZones": ["us-east-1a", "us-east-1b"]},
        {"name": "us-west-2"},
    ],
}


class TestAccount:
    def test_parses_detail_record(self):
        account = Account.model_validate(DETAIL_PAYLOAD)
        assert account.challenge_destructive_actions is True
        assert account.get_region("us-east-1").availability_zones == ["us-east-1a", "us-east-1b"]
        assert account.get_region("us-west-2").availability_zones == []
        assert account.get_region("eu-west-1") is None

    def test_catalog_summary_has_no_regions(self):
        account = Account.model_validate({"name": "test", "type": "aws"})
        assert account.regions == []
        assert account.challenge_destructive_actions is False

    def test_get_attribute_reads_declared_aliased_and_extra_fields(self):
        account = Account.model_validate(DETAIL_PAYLOAD)
        assert account.get_attribute("type") == "aws"
        assert account.get_attribute("challengeDestructiveActions") is True
        assert account.get_attribute("accountId") == "123456789012"
        assert account.get_attribute("missing") is None

    def test_accounts_are_immutable(self):
        account = Account(name="test", type="aws")
        with pytest.raises(ValidationError):
            account.name = "other"


class TestProviderSettings:
    def test_single_string_default_is_normalized_to_list(self):
        assert ProviderSettings.model_validate({"defaultProviders": "aws"}).default_providers == ["aws"]

    def test_list_default_is_kept_in_order(self):
        settings = ProviderSettings.model_validate({"defaultProviders": ["gce", "cf"]})
        assert settings.default_providers == ["gce", "cf"]

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_default_means_no_restriction(self, value):
        assert ProviderSettings.model_validate({"defaultProviders": value}).default_providers is None

    def test_empty_default_list_is_kept(self):
        assert ProviderSettings.model_validate({"defaultProviders": []}).default_providers == []

    def test_preferred_zone_table(self):
        settings = ProviderSettings.model_validate(
            {
                "providers": {
                    "aws": {"preferredZonesByAccount": {"default": {"us-east-1": ["us-east-1a"]}}},
                    "gce": {},
                }
            }
        )
        assert settings.preferred_zone_table == {
            "aws": {"default": {"us-east-1": ["us-east-1a"]}},
            "gce": {},
        }


class TestApplicationContext:
    def test_cloud_providers_split_on_comma(self):
        app = ApplicationContext(attributes={"cloudProviders": "gce,cf,unicron"})
        assert app.cloud_providers == ["gce", "cf", "unicron"]

    @pytest.mark.parametrize("attributes", [{}, {"cloudProviders": ""}, {"cloudProviders": None}])
    def test_missing_or_empty_is_not_configured(self, attributes):
        assert ApplicationContext(attributes=attributes).cloud_providers is None
