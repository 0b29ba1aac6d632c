# fastchess

Building blocks for running chess engine tournaments: checksums, logging,
timing helpers, a worker pool, an object cache and the shared stop flags
that let a tournament shut down cleanly on Ctrl+C.

The package has no dependencies outside the standard library.

## Modules

- `fastchess.crc32` – CRC-32 of a file (`calculate_crc32`, which returns
  `None` if the file cannot be opened) or of data fed in pieces
  (`initial_crc32`, `incremental_crc32`, `finalize_crc32`). Strings are
  encoded as UTF-8. `generate_crc_table` builds the lookup table.
- `fastchess.strutils` – `starts_with` (an empty needle never matches),
  `ends_with`, `contains` (substring for a string, membership for a sequence),
  `split_string` (drops empty segments), `find_element` (the element after a
  given one, converted with a callable such as `int`, or `None` if absent) and
  `join` (appends the delimiter after every element, the last one included).
- `fastchess.fd_limit` – `max_system_file_descriptor_count` (the soft
  `RLIMIT_NOFILE`, or `-1` where it is unavailable),
  `min_file_descriptor_required(concurrency)` and
  `max_concurrency(available_fds)`.
- `fastchess.timeutil` – `datetime(fmt)` (local time through a strftime
  pattern), `datetime_iso` (`YYYY-MM-DDTHH:MM:SS +HHMM`), `datetime_precise`
  (`HH:MM:SS.ffffff`) and `duration` (seconds or a `timedelta` as `HH:MM:SS`).
- `fastchess.logger` – `Logger` and `Level`, plus a shared instance `logger`.
  Lines go to a file opened with `open_file`, optionally gzip-compressed
  (`set_compress(True)` appends a timestamp and `.gz` to the name). Messages
  below the level set with `set_level` (default `Level.WARN`) are dropped.
  `print` writes to standard output and also logs. `write_to_engine` and
  `read_from_engine` record engine traffic when `set_engine_coms(True)` is on.
- `fastchess.rand` – a shared `random.Random` named `generator`, `seed(value)`
  to seed it (the seed is logged), and `random_uint64` for a fresh value from
  the system's random source.
- `fastchess.file_writer` – `FileWriter`, which appends to a file under a lock
  and flushes after every `write`. With `crc=True` it keeps a CRC-32 of the
  whole file, existing content included, readable as the `crc32` property and
  printed after every write.
- `fastchess.scope_guard` – `ScopeEntry` (an object with an `available` flag
  and `release`) and `ScopeGuard`, a context manager that releases its entry
  on exit.
- `fastchess.cache` – `CachePool` and `CachedEntry`: `get_entry(identifier,
  factory, *args, **kwargs)` hands out a free entry with that identifier, or
  creates one with `factory`, and marks it in use; `delete_from_cache` drops an
  entry that is in use.
- `fastchess.thread_vector` – `ThreadVector`, a list whose changes are made
  under a lock; use it as a context manager to iterate while holding the lock.
- `fastchess.threadpool` – `ThreadPool`, a fixed number of worker threads
  taking tasks in order. `enqueue` returns a `concurrent.futures.Future`.
  `kill` (also called on leaving a `with` block) cancels tasks still queued and
  waits for running ones; `resize` restarts the pool with a new size.
- `fastchess.globals` – `flags` (a `StopFlags` with `stop` and
  `abnormal_termination` events), `process_list` (a `ThreadVector` of
  `ProcessInformation`), `set_ctrl_c_handler` (SIGINT raises both flags),
  `write_to_open_pipes` (writes a null byte to each registered pipe so blocked
  reads return) and `stop_processes` (sends SIGINT, then SIGKILL where the
  platform has it, to each registered process).

## Examples

```python
from fastchess.crc32 import initial_crc32, incremental_crc32, finalize_crc32

crc = initial_crc32()
crc = incremental_crc32(crc, "Hello, ")
crc = incremental_crc32(crc, "world!")
assert finalize_crc32(crc) == 0xEBE6C6E6
```

```python
from fastchess.file_writer import FileWriter

with FileWriter("games.pgn", crc=True) as out:
    out.write('[Event "Tournament"]\n')
    print(hex(out.crc32))
```

```python
from fastchess.logger import Level, logger

logger.set_level(Level.INFO)
logger.open_file("fastchess.log")
logger.info("Starting round {}", 1)
logger.trace("not written: below INFO")
logger.close()
```

```python
from fastchess.threadpool import ThreadPool

with ThreadPool(4) as pool:
    futures = [pool.enqueue(pow, game, 2) for game in range(10)]
    results = [future.result() for future in futures]
```

```python
from fastchess.cache import CachePool
from fastchess.scope_guard import ScopeGuard

pool = CachePool()
entry = pool.get_entry("engine1", dict)
with ScopeGuard(entry):
    entry.value["games"] = 1
assert pool.get_entry("engine1", dict) is entry  # reused after release
```

```python
from fastchess.fd_limit import max_concurrency, min_file_descriptor_required

min_file_descriptor_required(4)   # 62
max_concurrency(110)              # 8
```

## What it does not do

This is a library of supporting pieces only. It has no command-line program,
does not start or talk to chess engines, does not parse options, play games,
read opening books, write PGN or EPD files or compute ratings.
`fastchess.globals` only signals processes that a caller has registered in
`process_list`; it never starts any.

## Running the tests

```
pip install -e .[test]
pytest
```