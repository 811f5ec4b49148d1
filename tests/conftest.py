import pytest
from prometheus_client import CollectorRegistry


@pytest.fixture()
def registry() -> "CollectorRegistry":
    """
    fresh Prometheus registry to avoid cross-test state.
    """
    return CollectorRegistry()


@pytest.fixture()
def prices() -> "dict[str, float]":
    """
    small price table in the bundled table's order.
    """
    return {
        "t2.micro": 0.0116,
        "t2.small": 0.023,
        "t3.micro": 0.0104,
        "m5.large": 0.096,
    }
