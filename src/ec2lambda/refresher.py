import asyncio
import time

import structlog

from ec2lambda.comparison import compare
from ec2lambda.metrics import MetricsUpdater
from ec2lambda.models import Comparison, LambdaParameters
from ec2lambda.pricing.base import PriceSource

logger = structlog.get_logger()


class Refresher:
    """
    Refresher periodically reloads EC2 prices from a price source,
    recomputes the comparison against Lambda and publishes it
    through the metrics updater. The loop runs until stop() is
    called, sleeping for the configured interval between cycles.
    """

    def __init__(
        self,
        source: "PriceSource",
        metrics_updater: "MetricsUpdater",
        parameters: "LambdaParameters",
        instance_filter: "str",
        num_instances: "int" = 1,
        refresh_interval_seconds: "int" = 3600,
    ) -> "None":
        self._source = source
        self._metrics = metrics_updater
        self._parameters = parameters
        self._filter = instance_filter
        self._num_instances = num_instances
        self._interval = refresh_interval_seconds
        self._stop_event: "asyncio.Event" = asyncio.Event()

    def stop(self) -> "None":
        """
        signals the refresh loop to stop after the current cycle.
        """
        self._stop_event.set()

    async def close(self) -> "None":
        """
        closes the price source.
        """
        await self._source.close()

    async def run(self) -> "None":
        """
        runs the main refresh loop. Runs until stop() is called.
        """
        while not self._stop_event.is_set():
            logger.info("refresh_cycle_start", source=self._source.name)
            await self.refresh()
            logger.info("refresh_cycle_end", source=self._source.name)

            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
            except TimeoutError:
                pass

    async def refresh(self) -> "Comparison | None":
        """
        runs a single refresh cycle. Errors are logged and counted,
        never raised, so a failing source keeps the last published
        values.
        """
        cycle_start = time.monotonic()
        source_name = self._source.name
        comparison: "Comparison | None" = None

        try:
            prices = await self._source.fetch_prices()
            logger.debug("prices_loaded", source=source_name, count=len(prices))
        except Exception:
            logger.exception("price_fetch_error", source=source_name)
            self._metrics.inc_refresh_error(source_name, "fetch")
            prices = None

        if prices is not None:
            try:
                comparison = compare(
                    prices, self._parameters, self._filter, self._num_instances
                )
                self._metrics.update_comparison(comparison)
            except Exception:
                logger.exception("comparison_error", source=source_name)
                self._metrics.inc_refresh_error(source_name, "compare")
                comparison = None

        duration = time.monotonic() - cycle_start
        self._metrics.observe_refresh_duration(source_name, duration)

        if comparison is not None:
            self._metrics.set_last_refresh_success(source_name, time.time())
            logger.info(
                "comparison_published",
                source=source_name,
                instance_types=len(comparison.rows),
            )
        return comparison
