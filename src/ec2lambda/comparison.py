import math
import re

import structlog

from ec2lambda.calculator import lambda_cost, lambda_invocations
from ec2lambda.models import (
    Chart,
    ChartSeries,
    Comparison,
    InstanceComparison,
    LambdaParameters,
)

logger = structlog.get_logger()

HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
LIMIT_EC2_INSTANCE_TYPES = 50
MAX_CHART_STEPS = 10

LAMBDA_SERIES_LABEL = "Lambda"
LAMBDA_BORDER_COLOR = "rgb(99, 255, 132)"
LAMBDA_BACKGROUND_COLOR = "rgba(99, 255, 132, 0.5)"


def filter_instance_types(
    prices: "dict[str, float]",
    pattern: "str",
    limit: "int" = LIMIT_EC2_INSTANCE_TYPES,
) -> "list[tuple[str, float]]":
    """
    returns the first `limit` instance types whose name matches
    pattern, searched case-insensitively. An invalid regular
    expression matches every instance type.
    """
    try:
        regex: "re.Pattern[str] | None" = re.compile(pattern, re.IGNORECASE)
    except re.error:
        logger.debug("invalid_filter_pattern", pattern=pattern)
        regex = None

    matched = [
        (instance_type, price)
        for instance_type, price in prices.items()
        if regex is None or regex.search(instance_type)
    ]
    return matched[:limit]


def daily_cost(hourly_price: "float", num_instances: "int") -> "float":
    return hourly_price * HOURS_PER_DAY * num_instances


def monthly_cost(daily: "float") -> "float":
    return daily * DAYS_PER_YEAR / MONTHS_PER_YEAR


def breakeven_invocations(
    total_cost: "float",
    parameters: "LambdaParameters",
) -> "int | float":
    return lambda_invocations(
        total_cost=total_cost,
        compute_time_ms=parameters.compute_time_ms,
        memory_size_gb=parameters.memory_size_gb,
        ephemeral_storage_gb=parameters.ephemeral_storage_gb,
    ).invocations


def build_rows(
    instance_types: "list[tuple[str, float]]",
    parameters: "LambdaParameters",
    num_instances: "int",
) -> "tuple[InstanceComparison, ...]":
    """
    builds one table row per instance type, cheapest first.
    """
    rows = []
    for instance_type, price in sorted(instance_types, key=lambda item: item[1]):
        daily = daily_cost(price, num_instances)
        rows.append(
            InstanceComparison(
                instance_type=instance_type,
                hourly_price=price,
                daily_cost=daily,
                monthly_cost=monthly_cost(daily),
                invocations=breakeven_invocations(daily, parameters),
            )
        )
    return tuple(rows)


def chart_labels(invocations: "int | float") -> "tuple[int, ...]":
    """
    splits [0, invocations] into at most MAX_CHART_STEPS steps and
    returns the rounded invocation count at each step boundary.
    """
    if math.isnan(invocations):
        invocations = 0

    num_steps = int(max(1, min(MAX_CHART_STEPS, invocations)))
    span = max(invocations, 0)
    if math.isinf(span):
        logger.warning("unbounded_breakeven", invocations=invocations)
        span = 0

    step_size = span / num_steps
    return tuple(_round_half_up(index * step_size) for index in range(num_steps + 1))


def build_chart(
    instance_types: "list[tuple[str, float]]",
    parameters: "LambdaParameters",
    num_instances: "int",
) -> "Chart":
    """
    builds the daily cost chart: one flat series per instance type
    and a Lambda series growing with the invocation count, up to the
    break-even point of the most expensive instance type.
    """
    max_price = max((price for _, price in instance_types), default=-math.inf)
    max_daily_cost = daily_cost(max_price, num_instances)
    labels = chart_labels(breakeven_invocations(max_daily_cost, parameters))

    datasets = []
    for instance_type, price in instance_types:
        red = price / max_price * 255 if max_price else 0
        datasets.append(
            ChartSeries(
                label=instance_type,
                data=tuple(daily_cost(price, num_instances) for _ in labels),
                border_color=f"rgb({_format_channel(red)}, 99, 132)",
                background_color=f"rgba({_format_channel(red)}, 99, 132, 0.5)",
            )
        )

    lambda_data = tuple(
        lambda_cost(
            requests=label,
            compute_time_ms=parameters.compute_time_ms,
            memory_size_gb=parameters.memory_size_gb,
            ephemeral_storage_gb=parameters.ephemeral_storage_gb,
        ).total_cost
        for label in labels
    )
    datasets.append(
        ChartSeries(
            label=LAMBDA_SERIES_LABEL,
            data=lambda_data,
            border_color=LAMBDA_BORDER_COLOR,
            background_color=LAMBDA_BACKGROUND_COLOR,
        )
    )

    return Chart(labels=labels, datasets=tuple(datasets))


def compare(
    prices: "dict[str, float]",
    parameters: "LambdaParameters",
    pattern: "str",
    num_instances: "int" = 1,
) -> "Comparison":
    """
    filters prices by pattern and compares every remaining instance
    type against Lambda running with the given parameters.
    """
    instance_types = filter_instance_types(prices, pattern)
    logger.debug(
        "instance_types_filtered",
        pattern=pattern,
        matched=len(instance_types),
        total=len(prices),
    )

    return Comparison(
        parameters=parameters,
        num_instances=num_instances,
        rows=build_rows(instance_types, parameters, num_instances),
        chart=build_chart(instance_types, parameters, num_instances),
    )


def _round_half_up(value: "float") -> "int":
    return math.floor(value + 0.5)


def _format_channel(value: "float") -> "str":
    # integral channels print without a trailing ".0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
