import pytest

from ec2lambda.pricing.base import instance_families
from ec2lambda.pricing.static import EC2_HOURLY_PRICES, StaticPriceSource


class TestBundledPrices:
    def test_contains_default_filter_family(self) -> "None":
        assert EC2_HOURLY_PRICES["t2.micro"] == 0.0116
        assert EC2_HOURLY_PRICES["m5.large"] == 0.096

    def test_prices_are_positive(self) -> "None":
        assert all(price > 0 for price in EC2_HOURLY_PRICES.values())


class TestStaticPriceSource:
    @pytest.mark.asyncio
    async def test_defaults_to_bundled_table(self) -> "None":
        source = StaticPriceSource()
        assert source.name == "static"
        assert await source.fetch_prices() == EC2_HOURLY_PRICES

    @pytest.mark.asyncio
    async def test_returns_copies(self) -> "None":
        source = StaticPriceSource({"t2.micro": 0.0116})
        prices = await source.fetch_prices()
        prices["t2.micro"] = 0.0

        assert await source.fetch_prices() == {"t2.micro": 0.0116}


class TestInstanceFamilies:
    def test_sorted_unique_prefixes(self, prices: "dict[str, float]") -> "None":
        assert instance_families(prices) == ["m5", "t2", "t3"]

    def test_bundled_families(self) -> "None":
        families = instance_families(EC2_HOURLY_PRICES)
        assert "t2" in families
        assert families == sorted(set(families))
