import math

import pytest

from ec2lambda import calculator
from ec2lambda.calculator import (
    compute_lambda_cost,
    compute_lambda_invocations,
    lambda_cost,
    lambda_invocations,
)
from ec2lambda.models import LambdaCostInput, LambdaInvocationsInput


class TestComputeLambdaCost:
    def test_zero_requests_cost_nothing(self) -> "None":
        result = lambda_cost(
            requests=0,
            compute_time_ms=200,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.25,
        )
        assert result.compute_cost == 0
        assert result.request_cost == 0
        assert result.storage_cost == 0
        assert result.total_cost == 0

    def test_total_is_exact_sum(self) -> "None":
        result = lambda_cost(
            requests=12_345,
            compute_time_ms=730,
            memory_size_gb=1.5,
            ephemeral_storage_gb=2.0,
        )
        assert result.total_cost == (
            result.compute_cost + result.request_cost + result.storage_cost
        )

    def test_one_million_requests_at_free_storage(self) -> "None":
        result = compute_lambda_cost(
            LambdaCostInput(
                requests=1_000_000,
                compute_time_ms=200,
                memory_size_gb=0.128,
                ephemeral_storage_gb=0.5,
            )
        )
        # 0.128 GB * 200000 s * 0.0000166667
        assert result.compute_cost == pytest.approx(0.42666752)
        assert result.request_cost == pytest.approx(0.2)
        assert result.storage_cost == 0
        assert result.total_cost == pytest.approx(0.62666752)

    def test_storage_below_free_baseline_is_negative(self) -> "None":
        baseline = lambda_cost(
            requests=1_000_000,
            compute_time_ms=200,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.5,
        )
        result = lambda_cost(
            requests=1_000_000,
            compute_time_ms=200,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.25,
        )
        assert result.storage_cost < 0
        assert result.storage_cost == pytest.approx(-0.00179)
        assert result.total_cost < result.compute_cost + result.request_cost
        assert result.total_cost < baseline.total_cost

    def test_zero_storage_is_not_special_cased(self) -> "None":
        result = lambda_cost(
            requests=1000,
            compute_time_ms=1000,
            memory_size_gb=1.0,
            ephemeral_storage_gb=0,
        )
        # -0.5 GB * 1000 s * 0.0000000358
        assert result.storage_cost == pytest.approx(-0.0000179)

    def test_storage_above_free_baseline_is_billed(self) -> "None":
        result = lambda_cost(
            requests=1000,
            compute_time_ms=1000,
            memory_size_gb=1.0,
            ephemeral_storage_gb=10.5,
        )
        assert result.storage_cost == pytest.approx(10 * 1000 * 0.0000000358)

    @pytest.mark.parametrize("memory_size_gb", [0.128, 1.0, 10.0])
    def test_more_requests_cost_more(self, memory_size_gb: "float") -> "None":
        fewer = lambda_cost(
            requests=1000,
            compute_time_ms=100,
            memory_size_gb=memory_size_gb,
            ephemeral_storage_gb=0.5,
        )
        more = lambda_cost(
            requests=1001,
            compute_time_ms=100,
            memory_size_gb=memory_size_gb,
            ephemeral_storage_gb=0.5,
        )
        assert more.request_cost > fewer.request_cost
        assert more.compute_cost > fewer.compute_cost
        assert more.total_cost > fewer.total_cost

    def test_keyword_form_matches_record_form(self) -> "None":
        record = compute_lambda_cost(
            LambdaCostInput(
                requests=500,
                compute_time_ms=300,
                memory_size_gb=0.5,
                ephemeral_storage_gb=1.0,
            )
        )
        keywords = lambda_cost(
            requests=500,
            compute_time_ms=300,
            memory_size_gb=0.5,
            ephemeral_storage_gb=1.0,
        )
        assert record == keywords


class TestComputeLambdaInvocations:
    def test_invocations_for_one_hundred_dollars(self) -> "None":
        result = compute_lambda_invocations(
            LambdaInvocationsInput(
                total_cost=100,
                compute_time_ms=100,
                memory_size_gb=0.128,
                ephemeral_storage_gb=0.5,
            )
        )
        # 100 / (0.128 * 0.1 * 0.0000166667 + 0.0000002)
        assert isinstance(result.invocations, int)
        assert 241_000_000 < result.invocations < 243_000_000

    def test_zero_budget_buys_nothing(self) -> "None":
        result = lambda_invocations(
            total_cost=0,
            compute_time_ms=200,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.5,
        )
        assert result.invocations == 0

    def test_result_is_floored(self) -> "None":
        result = lambda_invocations(
            total_cost=calculator.REQUEST_PRICE * 2.5,
            compute_time_ms=0,
            memory_size_gb=1.0,
            ephemeral_storage_gb=0.5,
        )
        assert result.invocations == 2

    @pytest.mark.parametrize("requests", [1, 999, 1_000_000])
    def test_round_trips_cost(self, requests: "int") -> "None":
        cost = lambda_cost(
            requests=requests,
            compute_time_ms=250,
            memory_size_gb=0.5,
            ephemeral_storage_gb=1.0,
        )
        result = lambda_invocations(
            total_cost=cost.total_cost,
            compute_time_ms=250,
            memory_size_gb=0.5,
            ephemeral_storage_gb=1.0,
        )
        # floor may lose one invocation to rounding
        assert result.invocations in (requests - 1, requests)

    def test_negative_cost_per_invocation_is_not_guarded(self) -> "None":
        # storage far below the baseline outweighs the request price
        result = lambda_invocations(
            total_cost=100,
            compute_time_ms=1000,
            memory_size_gb=0,
            ephemeral_storage_gb=-10,
        )
        assert isinstance(result.invocations, int)
        assert result.invocations < 0

    def test_zero_cost_per_invocation_yields_infinity(
        self,
        monkeypatch: "pytest.MonkeyPatch",
    ) -> "None":
        monkeypatch.setattr(calculator, "REQUEST_PRICE", 0.0)
        result = lambda_invocations(
            total_cost=100,
            compute_time_ms=0,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.5,
        )
        assert result.invocations == math.inf

    def test_zero_budget_and_zero_cost_yields_nan(
        self,
        monkeypatch: "pytest.MonkeyPatch",
    ) -> "None":
        monkeypatch.setattr(calculator, "REQUEST_PRICE", 0.0)
        result = lambda_invocations(
            total_cost=0,
            compute_time_ms=0,
            memory_size_gb=0.128,
            ephemeral_storage_gb=0.5,
        )
        assert math.isnan(result.invocations)


class TestDivide:
    def test_regular_division(self) -> "None":
        assert calculator._divide(1.0, 4.0) == 0.25

    def test_signed_infinities(self) -> "None":
        assert calculator._divide(1.0, 0.0) == math.inf
        assert calculator._divide(-1.0, 0.0) == -math.inf
        assert calculator._divide(1.0, -0.0) == -math.inf

    def test_zero_over_zero_is_nan(self) -> "None":
        assert math.isnan(calculator._divide(0.0, 0.0))
