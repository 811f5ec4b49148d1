from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram

from ec2lambda.calculator import lambda_cost
from ec2lambda.models import Comparison

_PER_INSTANCE_METRICS = (
    "ec2_daily_cost_usd",
    "ec2_monthly_cost_usd",
    "breakeven_invocations",
)


def create_comparison_metrics(
    registry: "CollectorRegistry" = REGISTRY,
) -> "dict[str, Gauge]":
    """
    creates the gauge families describing a comparison.
     - ec2_daily_cost_usd: daily cost of the configured number of
     instances, labeled by instance_type.
     - ec2_monthly_cost_usd: same, per month.
     - breakeven_invocations: daily lambda invocations costing the
     same as the instance type, labeled by instance_type.
     - lambda_cost_per_invocation_usd: cost of a single invocation.
    """
    return {
        "ec2_daily_cost_usd": Gauge(
            "ec2lambda_ec2_daily_cost_usd",
            "Daily cost in USD of the configured EC2 instances",
            ["instance_type"],
            registry=registry,
        ),
        "ec2_monthly_cost_usd": Gauge(
            "ec2lambda_ec2_monthly_cost_usd",
            "Monthly cost in USD of the configured EC2 instances",
            ["instance_type"],
            registry=registry,
        ),
        "breakeven_invocations": Gauge(
            "ec2lambda_breakeven_invocations",
            "Daily Lambda invocations costing the same as the EC2 instances",
            ["instance_type"],
            registry=registry,
        ),
        "lambda_cost_per_invocation_usd": Gauge(
            "ec2lambda_lambda_cost_per_invocation_usd",
            "Cost in USD of a single Lambda invocation",
            registry=registry,
        ),
    }


class MetricsUpdater:
    """
    publishes Comparison data as Prometheus gauges.
    """

    def __init__(self, registry: "CollectorRegistry" = REGISTRY) -> "None":
        self._metrics: "dict[str, Gauge]" = create_comparison_metrics(registry)
        self._refresh_duration: "Histogram" = Histogram(
            "ec2lambda_refresh_duration_seconds",
            "Duration of price refresh cycles",
            ["source"],
            registry=registry,
        )
        self._refresh_errors: "Counter" = Counter(
            "ec2lambda_refresh_errors_total",
            "Total number of refresh errors by source and stage",
            ["source", "stage"],
            registry=registry,
        )
        self._last_refresh_success: "Gauge" = Gauge(
            "ec2lambda_last_refresh_success_timestamp_seconds",
            "Unix timestamp of last successful refresh per source",
            ["source"],
            registry=registry,
        )

    def update_comparison(self, comparison: "Comparison") -> "None":
        """
        replaces the per instance gauges with the comparison's rows.
        Instance types no longer present are dropped.
        """
        for name in _PER_INSTANCE_METRICS:
            self._metrics[name].clear()

        for row in comparison.rows:
            labels = {"instance_type": row.instance_type}
            self._metrics["ec2_daily_cost_usd"].labels(**labels).set(row.daily_cost)
            self._metrics["ec2_monthly_cost_usd"].labels(**labels).set(
                row.monthly_cost
            )
            self._metrics["breakeven_invocations"].labels(**labels).set(
                float(row.invocations)
            )

        parameters = comparison.parameters
        per_invocation = lambda_cost(
            requests=1,
            compute_time_ms=parameters.compute_time_ms,
            memory_size_gb=parameters.memory_size_gb,
            ephemeral_storage_gb=parameters.ephemeral_storage_gb,
        ).total_cost
        self._metrics["lambda_cost_per_invocation_usd"].set(per_invocation)

    def observe_refresh_duration(
        self, source: "str", duration_seconds: "float"
    ) -> "None":
        self._refresh_duration.labels(source=source).observe(duration_seconds)

    def inc_refresh_error(self, source: "str", stage: "str") -> "None":
        self._refresh_errors.labels(source=source, stage=stage).inc()

    def set_last_refresh_success(self, source: "str", timestamp: "float") -> "None":
        self._last_refresh_success.labels(source=source).set(timestamp)
