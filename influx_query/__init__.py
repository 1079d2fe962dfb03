"""Send a fixed InfluxQL query to a local InfluxDB and print the response."""

from influx_query.config import QueryConfig
from influx_query.invoker import build_request, invoke

__all__ = ["QueryConfig", "build_request", "invoke"]
__version__ = "0.1.0"
