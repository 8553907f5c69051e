"""A minimal Elasticsearch HTTP client for index creation and bulk inserts."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

DEFAULT_URL = "http://127.0.0.1:9200"
DEFAULT_TIMEOUT = 10.0


class ElasticsearchError(ConnectionError):
    """Raised when the cluster cannot be reached or answers with an error."""


@dataclass(frozen=True)
class ElasticIndexMapping:
    """An index name together with its mapping definition."""

    index: str
    mapping: Dict[str, Any] = field(default_factory=dict)


def _to_json(document: Any) -> Any:
    if dataclasses.is_dataclass(document) and not isinstance(document, type):
        return dataclasses.asdict(document)
    if isinstance(document, Mapping):
        return dict(document)
    return document


class ElasticsearchClient:
    """Talks to a single Elasticsearch node; checks its health on creation."""

    def __init__(self, url: str = DEFAULT_URL) -> None:
        self.url = url.rstrip("/")
        self.timeout = DEFAULT_TIMEOUT
        status = self._request("GET", "/_cat/health")
        if not 200 <= status < 300:
            raise ElasticsearchError(str(status))

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> int:
        request = urllib.request.Request(self.url + path, data=body, method=method)
        if content_type is not None:
            request.add_header("Content-Type", content_type)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                response.read()
                return response.status
        except urllib.error.HTTPError as exc:
            return exc.code
        except (urllib.error.URLError, OSError) as exc:
            raise ElasticsearchError(str(exc)) from exc

    @staticmethod
    def _index_path(name: str) -> str:
        return "/" + urllib.parse.quote(name, safe="")

    def index_exists(self, name: str) -> bool:
        """Return True if the index exists; any failure counts as absent."""
        try:
            status = self._request("HEAD", self._index_path(name))
        except ElasticsearchError:
            return False
        return 200 <= status < 300

    def create_index(self, mapping: ElasticIndexMapping) -> None:
        """Create the mapping's index unless it already exists."""
        if not self.index_exists(mapping.index):
            self._request("PUT", self._index_path(mapping.index))

    def insert_many(self, index_name: str, documents: Iterable[Any]) -> None:
        """Bulk-index documents; the outcome of the request is not reported."""
        lines = []
        for document in documents:
            lines.append(json.dumps({"index": {}}))
            lines.append(json.dumps(_to_json(document)))
        body = ("\n".join(lines) + "\n").encode("utf-8") if lines else b""
        try:
            self._request(
                "POST",
                self._index_path(index_name) + "/_bulk",
                body=body,
                content_type="application/x-ndjson",
            )
        except ElasticsearchError:
            pass