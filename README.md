# logarchive

Helpers for working through zip archives of collected logs: pick out the
entries of interest, parse host information, saved credentials and cookie
files, and send the parsed documents to an Elasticsearch index.

Only the Python standard library is needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Archive files (`logarchive.archive`)

- `generate_hash(path)` returns the MD5 hex digest of the first 100 MiB of a file.
- `verify_existence(path)` returns `True`, or raises `FileNotFoundError` if the
  path does not exist.
- `verify_extension(path)` returns `SupportedExtension.ZIP` for a `.zip` file
  and `SupportedExtension.UNSUPPORTED` otherwise; it raises `ValueError` when
  the path is not a regular file.
- `register_hash(hash_value, registry)` appends a digest as a line to a
  registry file, creating it if needed. `is_registered(hash_value, registry)`
  tells whether a line of the file equals the digest, and returns `False` if
  the file does not exist. The registry defaults to `hashes.txt` in the
  current directory.
- `FilterOptions` holds the compiled name patterns and extensions used by
  `LogFilter`.

```python
from logarchive.archive import generate_hash, is_registered, register_hash

digest = generate_hash("logs.zip")
if not is_registered(digest, "hashes.txt"):
    register_hash(digest, "hashes.txt")
```

## Selecting entries (`logarchive.log_filter`, `logarchive.zip_archive`)

`LogFilter(names, extensions)` takes regular expressions (strings or compiled
patterns) and file-name endings. `matches(item)` is true when the name is
found by every pattern (`re.search`) and ends with any of the extensions.
Extensions are only applied when name patterns are also given; with no
patterns every name matches. A name that is a directory on the local file
system never matches.

`relation_mapper(items)` groups names by their first `/`-separated component
and returns the mapping; it keeps adding to the same mapping across calls.
`extract_log_folder(path)` returns that first component.

`ZipLogArchive(path)` opens a zip file and can be used as a context manager.
`enumerate(log_filter)` lists the entry names the filter's `matches` accepts,
and `read(filename)` returns an entry decoded as UTF-8 with invalid bytes
replaced, raising `FileNotFoundError` for an unknown entry.

```python
from logarchive.log_filter import LogFilter
from logarchive.zip_archive import ZipLogArchive

log_filter = LogFilter([r"(?i)passwords"], [".txt"])

with ZipLogArchive("logs.zip") as archive:
    names = archive.enumerate(log_filter)
    for folder, files in log_filter.relation_mapper(names).items():
        for name in files:
            text = archive.read(name)
```

## Parsing logs

```python
from logarchive.info_processor import InfoLogProcessor
from logarchive.password_processor import PassLogProcessor
from logarchive.cookie_processor import CookieLogProcessor, EmptyCookieLogError

info = InfoLogProcessor().parse("Country: XX\nHWID: 00000000-TEST\n")

credentials = PassLogProcessor(info).parse(
    "URL: https://first.example.com\n"
    "Username: user@example.com\n"
    "Password: password\n"
    "URL: https://second.example.com\n"
)

cookie_text = ".example.com\tTRUE\t/\tFALSE\t0\tsession\ttoken\n"
try:
    by_domain = CookieLogProcessor(info).parse(cookie_text)
except EmptyCookieLogError:
    by_domain = {}
```

- `InfoLogProcessor.parse` reads `key: value` lines and returns a `LogInfo`
  with `country` and `hwid`. Keys are matched case-insensitively; empty values
  are ignored, and a field not found stays `None`.
- `PassLogProcessor.parse` returns `Credential` records (`url`, `username`,
  `password`, `infos`). Blank lines and lines containing `=` are skipped. A
  record is emitted when a `URL:` line is met and the url, username and
  password seen so far are all non-empty, so the last block of a log is only
  emitted if another `URL:` line follows it. Values carry over between blocks.
- `CookieLogProcessor.parse` splits lines on tabs, strips each field and a
  leading `.`, drops empty fields, and keeps lines with exactly seven fields
  as `Cookie` records (`domain`, `http_only`, `path`, `secure`, `expires_in`,
  `name`, `value`). It returns a mapping of domain to `CookieDocument`, whose
  `country` is the log's country or `UNK`, and raises `EmptyCookieLogError`
  (a `ValueError`) when no cookie is found.

## Indexing in Elasticsearch (`logarchive.elastic`)

```python
from logarchive.elastic import ElasticIndexMapping, ElasticsearchClient

client = ElasticsearchClient("http://127.0.0.1:9200")
client.create_index(ElasticIndexMapping("cookies", {}))
client.insert_many("cookies", by_domain.values())
```

- Creating the client requests `/_cat/health` and raises
  `ElasticsearchError` if the node cannot be reached or answers with a
  non-2xx status. The URL defaults to `http://127.0.0.1:9200`.
- `index_exists(name)` returns `True` for a 2xx answer; any failure counts as
  absent.
- `create_index(mapping)` creates the index when it does not exist. The
  mapping's `mapping` dictionary is not sent; the index is created with the
  server's defaults.
- `insert_many(index_name, documents)` sends one `_bulk` request. Dataclass
  instances are converted with `dataclasses.asdict`, mappings with `dict`.
  The outcome of the request, including connection errors, is not reported.

## What this package does not do

There is no command-line program or end-to-end pipeline: nothing here picks
archives, walks them and feeds the parsers and the index on its own. The
pieces above have to be combined by the caller.