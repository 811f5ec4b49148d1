import asyncio
import dataclasses
import json
import signal

import structlog
from prometheus_client import start_http_server

from ec2lambda.cli import parse_args
from ec2lambda.comparison import compare
from ec2lambda.config import Config
from ec2lambda.formatting import describe_parameters, render_chart, render_table
from ec2lambda.logging import setup_logging
from ec2lambda.metrics import MetricsUpdater
from ec2lambda.models import Comparison
from ec2lambda.pricing.base import PriceSource, instance_families
from ec2lambda.pricing.remote import JsonPriceSource
from ec2lambda.pricing.static import StaticPriceSource
from ec2lambda.refresher import Refresher

logger = structlog.get_logger()


def _parse_listen_address(addr: "str") -> "tuple[str, int]":
    """
    parses listen address in format ':9186' or '0.0.0.0:9186'.
    """
    if addr.startswith(":"):
        return ("0.0.0.0", int(addr[1:]))

    host, port = addr.rsplit(":", 1)
    return (host, int(port))


def build_price_source(config: "Config") -> "PriceSource":
    if config.pricing_source:
        return JsonPriceSource(config.pricing_source)
    return StaticPriceSource()


def render(comparison: "Comparison", output: "str") -> "str":
    if output == "json":
        return json.dumps(dataclasses.asdict(comparison), indent=2)
    body = render_chart(comparison) if output == "chart" else render_table(comparison)
    return f"{describe_parameters(comparison)}\n\n{body}"


async def _load_prices(source: "PriceSource") -> "dict[str, float]":
    try:
        prices = await source.fetch_prices()
    finally:
        await source.close()
    logger.debug("prices_loaded", source=source.name, count=len(prices))
    return prices


def run_once(config: "Config") -> "str":
    """
    loads prices once and returns the rendered comparison (or the
    family list when requested).
    """
    source = build_price_source(config)
    try:
        prices = asyncio.run(_load_prices(source))
    except Exception as e:
        logger.exception("price_fetch_error", source=source.name)
        raise SystemExit(f"Could not load EC2 prices: {e}") from e

    if config.list_families:
        return "\n".join(instance_families(prices))

    comparison = compare(
        prices,
        config.lambda_parameters,
        config.instance_filter,
        config.num_instances,
    )
    return render(comparison, config.output)


def serve(config: "Config") -> "None":
    metrics_updater = MetricsUpdater()
    refresher = Refresher(
        build_price_source(config),
        metrics_updater,
        config.lambda_parameters,
        config.instance_filter,
        config.num_instances,
        config.refresh_interval,
    )

    host, port = _parse_listen_address(config.listen_address)
    start_http_server(port, addr=host)
    logger.info("metrics_server_started", host=host, port=port)

    async def _run() -> "None":
        loop = asyncio.get_running_loop()
        # for SIGINT and SIGTERM, signal the refresher
        # to stop gracefully
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, refresher.stop)

        try:
            await refresher.run()
        finally:
            logger.info("shutting_down")
            await refresher.close()
            logger.info("shutdown_complete")

    asyncio.run(_run())


def main() -> "None":
    config = parse_args()
    setup_logging(config.log_level)

    if config.exporter_enabled:
        serve(config)
        return

    print(run_once(config))


if __name__ == "__main__":
    main()
