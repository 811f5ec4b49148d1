from typing import Protocol


class PriceSource(Protocol):
    """
    PriceSource stands as a common protocol that all EC2
    price providers must satisfy.

    Sources return a mapping from instance type name
    (e.g. "t3.micro") to its hourly on-demand price in USD.
    Mapping order is preserved by the comparison, so sources
    should keep the order of their underlying document.
    """

    @property
    def name(self) -> "str": ...

    async def fetch_prices(self) -> "dict[str, float]": ...

    async def close(self) -> "None": ...


def instance_families(prices: "dict[str, float]") -> "list[str]":
    """
    returns the sorted, unique family prefixes of the given
    instance types ("t3.micro" -> "t3").
    """
    return sorted({instance_type.split(".")[0] for instance_type in prices})
