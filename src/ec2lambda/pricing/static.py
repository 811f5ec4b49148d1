import structlog

logger = structlog.get_logger()

# Linux on-demand prices in USD per hour, us-east-1
EC2_HOURLY_PRICES: "dict[str, float]" = {
    "t2.nano": 0.0058,
    "t2.micro": 0.0116,
    "t2.small": 0.023,
    "t2.medium": 0.0464,
    "t2.large": 0.0928,
    "t2.xlarge": 0.1856,
    "t2.2xlarge": 0.3712,
    "t3.nano": 0.0052,
    "t3.micro": 0.0104,
    "t3.small": 0.0208,
    "t3.medium": 0.0416,
    "t3.large": 0.0832,
    "t3.xlarge": 0.1664,
    "t3.2xlarge": 0.3328,
    "t3a.nano": 0.0047,
    "t3a.micro": 0.0094,
    "t3a.small": 0.0188,
    "t3a.medium": 0.0376,
    "t3a.large": 0.0752,
    "t3a.xlarge": 0.1504,
    "t3a.2xlarge": 0.3008,
    "m5.large": 0.096,
    "m5.xlarge": 0.192,
    "m5.2xlarge": 0.384,
    "m5.4xlarge": 0.768,
    "m5.8xlarge": 1.536,
    "m5.12xlarge": 2.304,
    "m5.16xlarge": 3.072,
    "m5.24xlarge": 4.608,
    "m5a.large": 0.086,
    "m5a.xlarge": 0.172,
    "m5a.2xlarge": 0.344,
    "m5a.4xlarge": 0.688,
    "m5a.8xlarge": 1.376,
    "m5a.12xlarge": 2.064,
    "m5a.16xlarge": 2.752,
    "m5a.24xlarge": 4.128,
    "m5n.large": 0.119,
    "m5n.xlarge": 0.238,
    "m5n.2xlarge": 0.476,
    "m5n.4xlarge": 0.952,
    "m5n.8xlarge": 1.904,
    "m5n.12xlarge": 2.856,
    "m5n.16xlarge": 3.808,
    "m5n.24xlarge": 5.712,
    "m6i.large": 0.096,
    "m6i.xlarge": 0.192,
    "m6i.2xlarge": 0.384,
    "m6i.4xlarge": 0.768,
    "m6i.8xlarge": 1.536,
    "m6i.12xlarge": 2.304,
    "m6i.16xlarge": 3.072,
    "m6i.24xlarge": 4.608,
    "m6i.32xlarge": 6.144,
    "m6a.large": 0.0864,
    "m6a.xlarge": 0.1728,
    "m6a.2xlarge": 0.3456,
    "m6a.4xlarge": 0.6912,
    "m6a.8xlarge": 1.3824,
    "m6a.12xlarge": 2.0736,
    "m6a.16xlarge": 2.7648,
    "m6a.24xlarge": 4.1472,
    "m6a.32xlarge": 5.5296,
    "m6a.48xlarge": 8.2944,
    "m7i.large": 0.1008,
    "m7i.xlarge": 0.2016,
    "m7i.2xlarge": 0.4032,
    "m7i.4xlarge": 0.8064,
    "m7i.8xlarge": 1.6128,
    "m7i.12xlarge": 2.4192,
    "m7i.16xlarge": 3.2256,
    "m7i.24xlarge": 4.8384,
    "m7i.48xlarge": 9.6768,
    "m7a.medium": 0.05789,
    "m7a.large": 0.11578,
    "m7a.xlarge": 0.23155,
    "m7a.2xlarge": 0.4631,
    "m7a.4xlarge": 0.9262,
    "m7a.8xlarge": 1.8523,
    "m7a.12xlarge": 2.7785,
    "m7a.16xlarge": 3.7046,
    "m7a.24xlarge": 5.557,
    "m7a.48xlarge": 11.1139,
    "c5.large": 0.085,
    "c5.xlarge": 0.17,
    "c5.2xlarge": 0.34,
    "c5.4xlarge": 0.68,
    "c5.9xlarge": 1.53,
    "c5.12xlarge": 2.04,
    "c5.18xlarge": 3.06,
    "c5.24xlarge": 4.08,
    "c5a.large": 0.077,
    "c5a.xlarge": 0.154,
    "c5a.2xlarge": 0.308,
    "c5a.4xlarge": 0.616,
    "c5a.8xlarge": 1.232,
    "c5a.12xlarge": 1.848,
    "c5a.16xlarge": 2.464,
    "c5a.24xlarge": 3.696,
    "c5n.large": 0.108,
    "c5n.xlarge": 0.216,
    "c5n.2xlarge": 0.432,
    "c5n.4xlarge": 0.864,
    "c5n.9xlarge": 1.944,
    "c5n.18xlarge": 3.888,
    "c6i.large": 0.085,
    "c6i.xlarge": 0.17,
    "c6i.2xlarge": 0.34,
    "c6i.4xlarge": 0.68,
    "c6i.8xlarge": 1.36,
    "c6i.12xlarge": 2.04,
    "c6i.16xlarge": 2.72,
    "c6i.24xlarge": 4.08,
    "c6i.32xlarge": 5.44,
    "c6a.large": 0.0765,
    "c6a.xlarge": 0.153,
    "c6a.2xlarge": 0.306,
    "c6a.4xlarge": 0.612,
    "c6a.8xlarge": 1.224,
    "c6a.12xlarge": 1.836,
    "c6a.16xlarge": 2.448,
    "c6a.24xlarge": 3.672,
    "c6a.32xlarge": 4.896,
    "c6a.48xlarge": 7.344,
    "c7i.large": 0.08925,
    "c7i.xlarge": 0.1785,
    "c7i.2xlarge": 0.357,
    "c7i.4xlarge": 0.714,
    "c7i.8xlarge": 1.428,
    "c7i.12xlarge": 2.142,
    "c7i.16xlarge": 2.856,
    "c7i.24xlarge": 4.284,
    "c7i.48xlarge": 8.568,
    "c7a.medium": 0.05208,
    "c7a.large": 0.10416,
    "c7a.xlarge": 0.20831,
    "c7a.2xlarge": 0.41663,
    "c7a.4xlarge": 0.83325,
    "c7a.8xlarge": 1.6665,
    "c7a.12xlarge": 2.49975,
    "c7a.16xlarge": 3.333,
    "c7a.24xlarge": 4.9995,
    "c7a.48xlarge": 9.999,
    "r5.large": 0.126,
    "r5.xlarge": 0.252,
    "r5.2xlarge": 0.504,
    "r5.4xlarge": 1.008,
    "r5.8xlarge": 2.016,
    "r5.12xlarge": 3.024,
    "r5.16xlarge": 4.032,
    "r5.24xlarge": 6.048,
    "r5a.large": 0.113,
    "r5a.xlarge": 0.226,
    "r5a.2xlarge": 0.452,
    "r5a.4xlarge": 0.904,
    "r5a.8xlarge": 1.808,
    "r5a.12xlarge": 2.712,
    "r5a.16xlarge": 3.616,
    "r5a.24xlarge": 5.424,
    "r5n.large": 0.149,
    "r5n.xlarge": 0.298,
    "r5n.2xlarge": 0.596,
    "r5n.4xlarge": 1.192,
    "r5n.8xlarge": 2.384,
    "r5n.12xlarge": 3.576,
    "r5n.16xlarge": 4.768,
    "r5n.24xlarge": 7.152,
    "r6i.large": 0.126,
    "r6i.xlarge": 0.252,
    "r6i.2xlarge": 0.504,
    "r6i.4xlarge": 1.008,
    "r6i.8xlarge": 2.016,
    "r6i.12xlarge": 3.024,
    "r6i.16xlarge": 4.032,
    "r6i.24xlarge": 6.048,
    "r6i.32xlarge": 8.064,
    "r6a.large": 0.1134,
    "r6a.xlarge": 0.2268,
    "r6a.2xlarge": 0.4536,
    "r6a.4xlarge": 0.9072,
    "r6a.8xlarge": 1.8144,
    "r6a.12xlarge": 2.7216,
    "r6a.16xlarge": 3.6288,
    "r6a.24xlarge": 5.4432,
    "r6a.32xlarge": 7.2576,
    "r6a.48xlarge": 10.8864,
    "r7i.large": 0.13230,
    "r7i.xlarge": 0.2646,
    "r7i.2xlarge": 0.5292,
    "r7i.4xlarge": 1.0584,
    "r7i.8xlarge": 2.1168,
    "r7i.12xlarge": 3.1752,
    "r7i.16xlarge": 4.2336,
    "r7i.24xlarge": 6.3504,
    "r7i.48xlarge": 12.7008,
    "r7a.medium": 0.07561,
    "r7a.large": 0.15122,
    "r7a.xlarge": 0.30245,
    "r7a.2xlarge": 0.6049,
    "r7a.4xlarge": 1.2098,
    "r7a.8xlarge": 2.4195,
    "r7a.12xlarge": 3.6293,
    "r7a.16xlarge": 4.839,
    "r7a.24xlarge": 7.2586,
    "r7a.48xlarge": 14.5171,
    "i3.large": 0.156,
    "i3.xlarge": 0.312,
    "i3.2xlarge": 0.624,
    "i3.4xlarge": 1.248,
    "i3.8xlarge": 2.496,
    "i3.16xlarge": 4.992,
    "i3en.large": 0.226,
    "i3en.xlarge": 0.452,
    "i3en.2xlarge": 0.904,
    "i3en.3xlarge": 1.356,
    "i3en.6xlarge": 2.712,
    "i3en.12xlarge": 5.424,
    "i3en.24xlarge": 10.848,
    "d2.xlarge": 0.69,
    "d2.2xlarge": 1.38,
    "d2.4xlarge": 2.76,
    "d2.8xlarge": 5.52,
    "d3.xlarge": 0.499,
    "d3.2xlarge": 0.999,
    "d3.4xlarge": 1.998,
    "d3.8xlarge": 3.996,
    "g4dn.xlarge": 0.526,
    "g4dn.2xlarge": 0.752,
    "g4dn.4xlarge": 1.204,
    "g4dn.8xlarge": 2.176,
    "g4dn.12xlarge": 3.912,
    "g4dn.16xlarge": 4.352,
    "g5.xlarge": 1.006,
    "g5.2xlarge": 1.212,
    "g5.4xlarge": 1.624,
    "g5.8xlarge": 2.448,
    "g5.12xlarge": 5.672,
    "g5.16xlarge": 4.096,
    "g5.24xlarge": 8.144,
    "g5.48xlarge": 16.288,
    "p3.2xlarge": 3.06,
    "p3.8xlarge": 12.24,
    "p3.16xlarge": 24.48,
    "p4d.24xlarge": 32.7726,
    "inf1.xlarge": 0.368,
    "inf1.2xlarge": 0.584,
    "inf1.6xlarge": 1.904,
    "inf1.24xlarge": 7.615,
    "inf2.xlarge": 0.7582,
    "inf2.8xlarge": 1.9678,
    "inf2.24xlarge": 6.4907,
    "inf2.48xlarge": 12.9813,
    "x1.16xlarge": 6.669,
    "x1.32xlarge": 13.338,
    "x1e.xlarge": 0.834,
    "x1e.2xlarge": 1.668,
    "x1e.4xlarge": 3.336,
    "x1e.8xlarge": 6.672,
    "x1e.16xlarge": 13.344,
    "x1e.32xlarge": 26.688,
    "x2idn.16xlarge": 6.669,
    "x2idn.24xlarge": 10.0035,
    "x2idn.32xlarge": 13.338,
    "x2iedn.xlarge": 0.83375,
    "x2iedn.2xlarge": 1.6675,
    "x2iedn.4xlarge": 3.335,
    "x2iedn.8xlarge": 6.67,
    "x2iedn.16xlarge": 13.34,
    "x2iedn.24xlarge": 20.01,
    "x2iedn.32xlarge": 26.68,
    "z1d.large": 0.186,
    "z1d.xlarge": 0.372,
    "z1d.2xlarge": 0.744,
    "z1d.3xlarge": 1.116,
    "z1d.6xlarge": 2.232,
    "z1d.12xlarge": 4.464,
}


class StaticPriceSource:
    """
    StaticPriceSource implements the PriceSource protocol over an
    in-memory mapping, the bundled price table by default.
    """

    def __init__(self, prices: "dict[str, float] | None" = None) -> "None":
        self._prices: "dict[str, float]" = dict(
            EC2_HOURLY_PRICES if prices is None else prices
        )

    @property
    def name(self) -> "str":
        return "static"

    async def fetch_prices(self) -> "dict[str, float]":
        logger.debug("static_prices_loaded", count=len(self._prices))
        return dict(self._prices)

    async def close(self) -> "None":
        pass
