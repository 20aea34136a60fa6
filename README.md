# bytekit

A set of small, dependency-free utilities for Python 3.10 and later.

## Modules

- `bytekit.wyhash`: the 64-bit wyhash function. `sum64(data, seed)` hashes bytes,
  `sum64_string(data, seed)` hashes the UTF-8 encoding of a string, and `Digest`
  hashes data fed in pieces (`write`, `sum64`, `sum`, `reset`) with the same result
  as `sum64` on the whole input. `DEFAULT_SEED` is the default seed.
- `bytekit.fastrand`: pseudo-random numbers from a shared generator: `uint32`,
  `uint64`, `rand_int`, `int31`, `int63`, `int31n`, `int63n`, `intn`, `uint32n`,
  `uint64n`, `float32`, `float64`. The `*n` functions return values in `[0, n)`;
  `int31n`, `int63n` and `intn` raise `ValueError` for a non-positive `n`.
  These numbers are not suitable for cryptography.
- `bytekit.stringx`: string helpers that count in code points: `pad_left_char`,
  `pad_right_char`, `pad_center_char` and their `*_space` forms, `repeat_char`,
  `remove_char`, `remove_string`, `sub`, `sub_start`, `rotate`, `reverse`,
  `must_reverse`, `shuffle`, `contains_any_substrings`, `is_alpha`,
  `is_alphanumeric` and `is_numeric`. `reverse` raises `DecodeRuneError` for
  bytes that are not valid UTF-8. `rotate` reduces the shift modulo the UTF-8
  byte length of the string.
- `bytekit.mcache`: a cache of byte buffers whose sizes are powers of two.
  `malloc(size, capacity)` returns a writable `memoryview` of `size` bytes over a
  pooled `bytearray`; `free(buf)` hands the buffer back for reuse. Also exposes
  `bsr`, `is_power_of_two` and `calc_index`.
- `bytekit.logger`: levelled logging (`Level.TRACE` to `Level.FATAL`) with a
  replaceable default logger. `set_level` sets the threshold, `set_default_logger`
  swaps the logger, and module functions such as `info`, `infof`, `ctx_errorf`
  forward to it. `LocalLogger` writes timestamped lines with the caller's file and
  line to a stream (standard error by default). The fatal methods exit the process
  with status 1.
- `bytekit.syncx`: `RWMutex`, a reader/writer lock split into shards (one per CPU
  by default). `rlocker()` returns the read lock of the calling thread's shard,
  usable with `with`; `lock`/`unlock`, or `with mutex:`, take every shard for
  writing. `shard_id()` gives the calling thread's id.
- `bytekit.gopool`: `Pool` runs callables on worker threads started on demand, up
  to its capacity. An exception raised by a task is logged through
  `bytekit.logger` at error level and passed to the handler set with
  `set_panic_handler`. `Config.scale_threshold` controls when more workers start.
  The module-level `go`, `ctx_go`, `set_cap` and `set_panic_handler` use a shared
  default pool; `register_pool` and `get_pool` keep pools by name, and
  registering a taken name raises `PoolAlreadyRegisteredError`.

## Examples

```python
from bytekit import wyhash, stringx, gopool

print(wyhash.sum64(b"hello", wyhash.DEFAULT_SEED))

d = wyhash.Digest(wyhash.DEFAULT_SEED)
d.write(b"hel")
d.write(b"lo")
assert d.sum64() == wyhash.sum64(b"hello", wyhash.DEFAULT_SEED)

print(stringx.pad_center_char("abc", 7, "-"))  # --abc--
print(stringx.sub("zh英文hun排", 2, 5))         # 英文h

pool = gopool.Pool("work", 100, gopool.Config())
pool.go(lambda: print("ran in the pool"))
```

## What it does not do

- There is no concurrent sorted set or other collection type; the package
  offers only the modules listed above.
- There is no command-line tool; everything is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```