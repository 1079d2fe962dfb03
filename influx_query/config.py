from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

API_URL = "http://localhost:8086"  # influxdb http endpoint
QUERY_PATH = "/query"
DATABASE = "mydb"
QUERY = "SELECT * FROM cpu WHERE host='server03' AND time < now() - 1d"


@dataclass(frozen=True)
class QueryConfig:
    """Where the query goes and what it asks for."""

    base_url: str = API_URL
    path: str = QUERY_PATH
    database: str = DATABASE
    query: str = QUERY
    pretty: bool = True
    timeout: Optional[float] = None  # wait as long as the server takes

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"

    def params(self) -> Dict[str, str]:
        # same order as the original curl call: pretty, db, q
        params: Dict[str, str] = {}
        if self.pretty:
            params["pretty"] = "true"
        params["db"] = self.database
        params["q"] = self.query
        return params
