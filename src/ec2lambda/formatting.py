import math

from ec2lambda.models import KILO, Comparison

SIZE_UNITS = ("MB", "GB", "TB", "PB", "EB", "ZB", "YB")

MS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60

TABLE_HEADERS = (
    "Instance Type",
    "Daily cost",
    "Monthly cost",
    "Daily lambda invocation equivalent",
)


def format_size_mb(value: "float") -> "str":
    """
    formats a size in megabytes with the largest unit that keeps
    the value at or above 1 (1536 -> "1.5 GB").
    """
    unit_index = 0
    scaled = float(value)
    while scaled >= KILO and unit_index < len(SIZE_UNITS) - 1:
        unit_index += 1
        scaled /= KILO

    return f"{_trim(scaled)} {SIZE_UNITS[unit_index]}"


def format_duration_ms(value: "float") -> "str":
    if value < MS_PER_SECOND:
        return f"{_trim(value)} ms"

    if value > SECONDS_PER_MINUTE * MS_PER_SECOND:
        seconds = value / MS_PER_SECOND
        minutes = math.floor(seconds / SECONDS_PER_MINUTE)
        remaining = math.floor(seconds - minutes * SECONDS_PER_MINUTE + 0.5)
        return f"{minutes} min {remaining} s"

    return f"{_trim(value / MS_PER_SECOND)} s"


def format_number(value: "float") -> "str":
    """
    formats a number with thousands separators and at most three
    fraction digits. Non-finite values print as inf/-inf/nan.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)

    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    # rounding can leave a negative zero behind
    return "0" if text == "-0" else text


def format_usd(value: "float") -> "str":
    return f"${format_number(value)}"


def render_table(comparison: "Comparison") -> "str":
    """
    renders the comparison rows as a fixed-width text table.
    """
    if not comparison.rows:
        return "No results"

    body = [
        (
            row.instance_type,
            format_usd(row.daily_cost),
            format_usd(row.monthly_cost),
            format_number(row.invocations),
        )
        for row in comparison.rows
    ]
    widths = [
        max(len(line[column]) for line in [TABLE_HEADERS, *body])
        for column in range(len(TABLE_HEADERS))
    ]

    lines = [_render_line(TABLE_HEADERS, widths)]
    lines.append("  ".join("-" * width for width in widths))
    lines.extend(_render_line(line, widths) for line in body)
    return "\n".join(lines)


def render_chart(comparison: "Comparison") -> "str":
    """
    renders the chart series as text, one line per series with its
    daily cost at every invocation count on the x axis.
    """
    chart = comparison.chart
    label_width = max(len(series.label) for series in chart.datasets)
    header = "invocations".ljust(label_width) + "  " + "  ".join(
        format_number(label) for label in chart.labels
    )

    lines = [header]
    for series in chart.datasets:
        values = "  ".join(format_usd(value) for value in series.data)
        lines.append(f"{series.label.ljust(label_width)}  {values}")
    return "\n".join(lines)


def describe_parameters(comparison: "Comparison") -> "str":
    parameters = comparison.parameters
    return (
        f"Lambda: memory {format_size_mb(parameters.memory_size_mb)}, "
        f"storage {format_size_mb(parameters.storage_mb)}, "
        f"duration {format_duration_ms(parameters.compute_time_ms)}; "
        f"EC2 instances: {comparison.num_instances}"
    )


def _render_line(cells: "tuple[str, ...]", widths: "list[int]") -> "str":
    first, *rest = cells
    parts = [first.ljust(widths[0])]
    parts.extend(cell.rjust(width) for cell, width in zip(rest, widths[1:]))
    return "  ".join(parts).rstrip()


def _trim(value: "float") -> "str":
    # 1.0 -> "1", 1.5 -> "1.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
