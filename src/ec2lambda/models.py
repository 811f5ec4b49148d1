from dataclasses import dataclass

# megabytes per gigabyte, as used by the Lambda console
KILO = 1024


@dataclass(frozen=True, slots=True)
class LambdaCostInput:
    """
    LambdaCostInput describes a batch of Lambda invocations
    sharing the same duration, memory and storage settings.
    """

    requests: "int"
    compute_time_ms: "float"
    memory_size_gb: "float"
    ephemeral_storage_gb: "float"


@dataclass(frozen=True, slots=True)
class LambdaCostOutput:
    compute_cost: "float"
    request_cost: "float"
    # note - negative when ephemeral storage is below the free baseline
    storage_cost: "float"
    total_cost: "float"


@dataclass(frozen=True, slots=True)
class LambdaInvocationsInput:
    """
    LambdaInvocationsInput describes a USD budget and the
    settings of a single invocation spending it.
    """

    total_cost: "float"
    compute_time_ms: "float"
    memory_size_gb: "float"
    ephemeral_storage_gb: "float"


@dataclass(frozen=True, slots=True)
class LambdaInvocationsOutput:
    # int when finite, otherwise the raw inf/nan float
    invocations: "int | float"


@dataclass(frozen=True, slots=True)
class LambdaParameters:
    """
    LambdaParameters holds the user facing lambda settings,
    expressed in megabytes and milliseconds.
    """

    memory_size_mb: "float" = 128
    compute_time_ms: "float" = 200
    storage_mb: "float" = 512

    @property
    def memory_size_gb(self) -> "float":
        return self.memory_size_mb / KILO

    @property
    def ephemeral_storage_gb(self) -> "float":
        return self.storage_mb / KILO


@dataclass(frozen=True, slots=True)
class InstanceComparison:
    """
    InstanceComparison is a single table row comparing one
    EC2 instance type against Lambda.
    """

    instance_type: "str"
    hourly_price: "float"
    daily_cost: "float"
    monthly_cost: "float"
    # daily lambda invocations costing the same as daily_cost
    invocations: "int | float"


@dataclass(frozen=True, slots=True)
class ChartSeries:
    label: "str"
    data: "tuple[float, ...]"
    border_color: "str"
    background_color: "str"


@dataclass(frozen=True, slots=True)
class Chart:
    # invocation counts along the x axis
    labels: "tuple[int, ...]"
    datasets: "tuple[ChartSeries, ...]"


@dataclass(frozen=True, slots=True)
class Comparison:
    parameters: "LambdaParameters"
    num_instances: "int"
    rows: "tuple[InstanceComparison, ...]"
    chart: "Chart"
