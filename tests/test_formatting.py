import math

import pytest

from ec2lambda.comparison import compare
from ec2lambda.formatting import (
    describe_parameters,
    format_duration_ms,
    format_number,
    format_size_mb,
    format_usd,
    render_chart,
    render_table,
)
from ec2lambda.models import LambdaParameters


class TestFormatSize:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (128, "128 MB"),
            (1024, "1 GB"),
            (1536, "1.5 GB"),
            (10240, "10 GB"),
            (1024 * 1024, "1 TB"),
        ],
    )
    def test_format_size_mb(self, value: "int", expected: "str") -> "None":
        assert format_size_mb(value) == expected


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (200, "200 ms"),
            (1500, "1.5 s"),
            (60_000, "60 s"),
            (90_000, "1 min 30 s"),
            (15 * 60 * 1000, "15 min 0 s"),
        ],
    )
    def test_format_duration_ms(self, value: "int", expected: "str") -> "None":
        assert format_duration_ms(value) == expected


class TestFormatNumber:
    def test_thousands_separators(self) -> "None":
        assert format_number(241_935_234) == "241,935,234"

    def test_at_most_three_fraction_digits(self) -> "None":
        assert format_number(0.2784) == "0.278"
        assert format_number(1.5) == "1.5"

    def test_non_finite(self) -> "None":
        assert format_number(math.inf) == "inf"
        assert format_number(math.nan) == "nan"

    def test_tiny_negative_is_zero(self) -> "None":
        assert format_number(-0.0001) == "0"

    def test_usd(self) -> "None":
        assert format_usd(8468.0) == "$8,468"


class TestRender:
    def test_empty_table(self) -> "None":
        comparison = compare({"t2.micro": 0.0116}, LambdaParameters(), "m5")
        assert render_table(comparison) == "No results"

    def test_table_rows(self) -> "None":
        comparison = compare(
            {"t2.small": 0.023, "t2.micro": 0.0116},
            LambdaParameters(),
            "t2",
        )
        lines = render_table(comparison).splitlines()
        assert lines[0].startswith("Instance Type")
        assert "Daily lambda invocation equivalent" in lines[0]
        assert lines[2].startswith("t2.micro")
        assert "$0.278" in lines[2]
        assert "$8.468" in lines[2]
        assert lines[3].startswith("t2.small")

    def test_chart_lists_every_series(self) -> "None":
        comparison = compare({"t2.micro": 0.0116}, LambdaParameters(), "t2")
        lines = render_chart(comparison).splitlines()
        assert lines[0].startswith("invocations")
        assert lines[1].startswith("t2.micro")
        assert lines[2].startswith("Lambda")

    def test_describe_parameters(self) -> "None":
        comparison = compare(
            {"t2.micro": 0.0116},
            LambdaParameters(memory_size_mb=1024, compute_time_ms=1500),
            "t2",
            3,
        )
        assert describe_parameters(comparison) == (
            "Lambda: memory 1 GB, storage 512 MB, duration 1.5 s; EC2 instances: 3"
        )
