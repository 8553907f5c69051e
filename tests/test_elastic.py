import json
import socket
import threading
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from logarchive.elastic import (
    ElasticIndexMapping,
    ElasticsearchClient,
    ElasticsearchError,
)


class _Handler(BaseHTTPRequestHandler):
    def log_message(self, *args):
        pass

    def _record(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        self.server.requests.append(
            (self.command, self.path, body, self.headers.get("Content-Type"))
        )

    def _reply(self, status):
        self.send_response(status)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self):
        self._record()
        self._reply(self.server.health_status)

    def do_HEAD(self):
        self._record()
        name = self.path.lstrip("/")
        self._reply(200 if name in self.server.indices else 404)

    def do_PUT(self):
        self._record()
        self.server.indices.add(self.path.lstrip("/"))
        self._reply(200)

    def do_POST(self):
        self._record()
        self._reply(200)


@pytest.fixture
def server():
    srv = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    srv.requests = []
    srv.indices = set()
    srv.health_status = 200
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def _url(srv):
    host, port = srv.server_address[:2]
    return f"http://{host}:{port}"


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_health_checked_on_creation(server):
    ElasticsearchClient(_url(server))
    assert server.requests[0][:2] == ("GET", "/_cat/health")


def test_unhealthy_cluster_raises(server):
    server.health_status = 503
    with pytest.raises(ElasticsearchError, match="503"):
        ElasticsearchClient(_url(server))


def test_index_exists(server):
    server.indices.add("logs")
    client = ElasticsearchClient(_url(server))
    assert client.index_exists("logs") is True
    assert client.index_exists("other") is False


def test_create_index_only_when_missing(server):
    client = ElasticsearchClient(_url(server))
    client.create_index(ElasticIndexMapping("cookies", {"properties": {}}))
    client.create_index(ElasticIndexMapping("cookies", {"properties": {}}))
    puts = [r for r in server.requests if r[0] == "PUT"]
    assert [r[1] for r in puts] == ["/cookies"]
    assert "cookies" in server.indices


@dataclass
class _Doc:
    domain: str
    count: int


def test_insert_many_sends_ndjson(server):
    client = ElasticsearchClient(_url(server))
    docs = [_Doc("example.com", 1), {"domain": "shop.example.com", "count": 2}]
    client.insert_many("cookies", docs)
    method, path, body, ctype = server.requests[-1]
    assert (method, path, ctype) == ("POST", "/cookies/_bulk", "application/x-ndjson")
    lines = body.decode().splitlines()
    assert [json.loads(line) for line in lines] == [
        {"index": {}},
        {"domain": "example.com", "count": 1},
        {"index": {}},
        {"domain": "shop.example.com", "count": 2},
    ]
    assert body.endswith(b"\n")


def test_mapping_holds_values():
    mapping = ElasticIndexMapping("logs", {"properties": {"a": {"type": "text"}}})
    assert mapping.index == "logs"
    assert mapping.mapping["properties"]["a"]["type"] == "text"