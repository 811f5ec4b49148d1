import argparse

from ec2lambda.config import Config

# bounds of the settings Lambda accepts
MEMORY_MB_RANGE = (128, 10240)
STORAGE_MB_RANGE = (512, 10240)
DURATION_MS_RANGE = (100, 15 * 60 * 1000)


def _bounded_int(low: "int", high: "int | None" = None):
    """
    returns an argparse type converting to int and rejecting
    values outside [low, high].
    """

    def convert(value: "str") -> "int":
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")

        if number < low:
            raise argparse.ArgumentTypeError(f"{number} must be at least {low}")
        if high is not None and number > high:
            raise argparse.ArgumentTypeError(f"{number} must be at most {high}")
        return number

    return convert


def parse_args(argv: "list[str] | None" = None) -> "Config":
    parser = argparse.ArgumentParser(
        prog="ec2lambda",
        description="Compare EC2 instance costs against AWS Lambda invocations",
    )
    parser.add_argument(
        "--lambda.memory-mb",
        dest="memory_size_mb",
        type=_bounded_int(*MEMORY_MB_RANGE),
        default=128,
        help="Lambda memory size in MB (default: 128)",
    )
    parser.add_argument(
        "--lambda.storage-mb",
        dest="storage_mb",
        type=_bounded_int(*STORAGE_MB_RANGE),
        default=512,
        help="Lambda ephemeral storage in MB (default: 512)",
    )
    parser.add_argument(
        "--lambda.duration-ms",
        dest="compute_time_ms",
        type=_bounded_int(*DURATION_MS_RANGE),
        default=200,
        help="Average invocation duration in ms (default: 200)",
    )
    parser.add_argument(
        "--ec2.filter",
        dest="instance_filter",
        default="t2",
        help="Filter by instance type, regex enabled (default: t2)",
    )
    parser.add_argument(
        "--ec2.instances",
        dest="num_instances",
        type=_bounded_int(0),
        default=1,
        help="Number of EC2 instances (default: 1)",
    )
    parser.add_argument(
        "--pricing.source",
        dest="pricing_source",
        default=None,
        help=(
            "URL or path of a JSON price document "
            "(default: $EC2LAMBDA_PRICING_SOURCE or the bundled table)"
        ),
    )
    parser.add_argument(
        "--output",
        dest="output",
        default="table",
        choices=["table", "chart", "json"],
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--list-families",
        dest="list_families",
        action="store_true",
        help="List the known instance families and exit",
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default="",
        help="Serve Prometheus metrics on this address, e.g. :9186",
    )
    parser.add_argument(
        "--refresh.interval",
        dest="refresh_interval",
        type=_bounded_int(1),
        default=3600,
        help="Price refresh interval in seconds (default: 3600)",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )

    args = parser.parse_args(argv)
    config = Config.from_env()
    config.memory_size_mb = args.memory_size_mb
    config.storage_mb = args.storage_mb
    config.compute_time_ms = args.compute_time_ms
    config.instance_filter = args.instance_filter
    config.num_instances = args.num_instances
    if args.pricing_source is not None:
        config.pricing_source = args.pricing_source
    config.output = args.output
    config.list_families = args.list_families
    config.listen_address = args.listen_address
    config.refresh_interval = args.refresh_interval
    config.log_level = args.log_level
    return config
