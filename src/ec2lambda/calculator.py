import math

from ec2lambda.models import (
    LambdaCostInput,
    LambdaCostOutput,
    LambdaInvocationsInput,
    LambdaInvocationsOutput,
)

MS_TO_S = 0.001
# USD per GB-second of allocated memory
COMPUTE_PRICE_PER_GB_SECOND = 0.0000166667
# USD per invocation
REQUEST_PRICE = 0.0000002
# USD per GB-second of ephemeral storage above the free baseline
STORAGE_PRICE_PER_GB_SECOND = 0.0000000358
# ephemeral storage included with every invocation
FREE_STORAGE_GB = 0.5


def compute_lambda_cost(cost_input: "LambdaCostInput") -> "LambdaCostOutput":
    """
    computes the USD cost of running cost_input.requests invocations.

    No validation is applied. Storage below FREE_STORAGE_GB produces a
    negative storage_cost which lowers total_cost.
    """
    total_compute_seconds = (
        cost_input.requests * cost_input.compute_time_ms * MS_TO_S
    )
    compute_cost = (
        cost_input.memory_size_gb
        * total_compute_seconds
        * COMPUTE_PRICE_PER_GB_SECOND
    )
    request_cost = cost_input.requests * REQUEST_PRICE
    billable_storage_gb = cost_input.ephemeral_storage_gb - FREE_STORAGE_GB
    storage_cost = (
        billable_storage_gb * total_compute_seconds * STORAGE_PRICE_PER_GB_SECOND
    )
    total_cost = compute_cost + request_cost + storage_cost

    return LambdaCostOutput(
        compute_cost=compute_cost,
        request_cost=request_cost,
        storage_cost=storage_cost,
        total_cost=total_cost,
    )


def compute_lambda_invocations(
    invocations_input: "LambdaInvocationsInput",
) -> "LambdaInvocationsOutput":
    """
    computes how many invocations invocations_input.total_cost pays for.

    A zero or negative cost per invocation is not guarded against: the
    result follows IEEE-754 division (inf, -inf or nan) and is returned
    as-is. Callers clamp downstream.
    """
    compute_seconds_per_invocation = invocations_input.compute_time_ms * MS_TO_S
    compute_cost_per_invocation = (
        invocations_input.memory_size_gb
        * compute_seconds_per_invocation
        * COMPUTE_PRICE_PER_GB_SECOND
    )
    storage_cost_per_invocation = (
        (invocations_input.ephemeral_storage_gb - FREE_STORAGE_GB)
        * compute_seconds_per_invocation
        * STORAGE_PRICE_PER_GB_SECOND
    )
    cost_per_invocation = (
        compute_cost_per_invocation + REQUEST_PRICE + storage_cost_per_invocation
    )

    ratio = _divide(invocations_input.total_cost, cost_per_invocation)
    if not math.isfinite(ratio):
        return LambdaInvocationsOutput(invocations=ratio)

    return LambdaInvocationsOutput(invocations=math.floor(ratio))


def lambda_cost(
    requests: "int",
    compute_time_ms: "float",
    memory_size_gb: "float",
    ephemeral_storage_gb: "float",
) -> "LambdaCostOutput":
    return compute_lambda_cost(
        LambdaCostInput(
            requests=requests,
            compute_time_ms=compute_time_ms,
            memory_size_gb=memory_size_gb,
            ephemeral_storage_gb=ephemeral_storage_gb,
        )
    )


def lambda_invocations(
    total_cost: "float",
    compute_time_ms: "float",
    memory_size_gb: "float",
    ephemeral_storage_gb: "float",
) -> "LambdaInvocationsOutput":
    return compute_lambda_invocations(
        LambdaInvocationsInput(
            total_cost=total_cost,
            compute_time_ms=compute_time_ms,
            memory_size_gb=memory_size_gb,
            ephemeral_storage_gb=ephemeral_storage_gb,
        )
    )


def _divide(numerator: "float", denominator: "float") -> "float":
    """
    float division with IEEE-754 semantics for a zero denominator
    instead of ZeroDivisionError.
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    # sign of a signed zero denominator still applies
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
