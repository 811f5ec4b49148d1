import os
from dataclasses import dataclass

from ec2lambda.models import LambdaParameters


@dataclass
class Config:
    memory_size_mb: "int" = 128
    storage_mb: "int" = 512
    compute_time_ms: "int" = 200
    # regex matched against instance type names
    instance_filter: "str" = "t2"
    num_instances: "int" = 1

    # URL or path of a JSON price document,
    # empty for the bundled table
    pricing_source: "str" = ""
    output: "str" = "table"
    list_families: "bool" = False

    # listen_address: format ":9186" or
    # "0.0.0.0:9186", empty disables the exporter
    listen_address: "str" = ""
    # price refresh interval in seconds
    refresh_interval: "int" = 3600
    log_level: "str" = "info"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            pricing_source=os.environ.get("EC2LAMBDA_PRICING_SOURCE", ""),
        )

    @property
    def exporter_enabled(self) -> "bool":
        return bool(self.listen_address)

    @property
    def lambda_parameters(self) -> "LambdaParameters":
        return LambdaParameters(
            memory_size_mb=self.memory_size_mb,
            compute_time_ms=self.compute_time_ms,
            storage_mb=self.storage_mb,
        )
