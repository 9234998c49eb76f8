# interview_tasks

A handful of small, self-contained concurrency and caching utilities built on
the standard library only.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `interview_tasks.profile_cache`: `ProfileCache`, a thread-safe in-memory
  cache of `Profile` objects (each with a list of `Order`s) keyed by user
  UUID. Entries live for `ttl` seconds (two by default); every
  `set_update_profile` resets the lifetime, and `get_profile` returns `None`
  for a missing or expired entry. A background thread started by
  `automatic_cleanup` removes expired entries; `close()` stops it, and the
  cache can be used as a context manager that closes it on exit.
- `interview_tasks.kv_store`: `KeyValueStore`, a thread-safe string store.
  `put` raises `TypeError` for a non-string value, `get` raises `KeyError`
  for a missing key.
- `interview_tasks.http_server`: `CacheService` handles put and get requests
  against a `KeyValueStore` and counts them; `make_server` wraps it in a
  threaded HTTP server, `start_server` runs one until interrupted.
- `interview_tasks.lru_cache`: `LRUCache` with `get` (returns `-1` on a miss)
  and `put`, evicting the least recently used entry once full. The capacity
  must be at least 1.
- `interview_tasks.merge`: `merge_iterables` drains several iterables, each
  on its own thread, into one iterator. Items of one source keep their order;
  an exception raised by a source is raised again by the merged iterator.
  `merge_channel_pattern` merges three producers and returns `[1, ..., 9]`.
- `interview_tasks.rate_limiter`: `RateLimiter(limit, window=1.0)` allows
  `limit` calls per fixed window; `process(func)` runs `func` and returns its
  result, or raises `TooManyRequestsError` once the window's quota is used.
  `make_server` and `serve` provide an HTTP endpoint `/request` guarded by it
  (200, 429 when limited, 500 if the guarded call fails).
- `interview_tasks.url_scraper`: `check_url` returns `"<url> url - ok"` when a
  GET answers 200 and `"<url> url - not ok"` otherwise; `scrape_urls` checks a
  list of URLs on a pool of workers (three by default, one-second timeout) and
  maps each URL to its verdict.
- `interview_tasks.worker_pool`: `WorkerPool(num_workers, delay=1.0)`;
  `submit_tasks` runs every task on the workers, each taking `delay` seconds,
  prints progress and returns the results in completion order.

## Examples

    from interview_tasks.lru_cache import LRUCache

    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.get(1)      # 1
    cache.put(3, 3)   # evicts key 2
    cache.get(2)      # -1

    from interview_tasks.rate_limiter import RateLimiter, TooManyRequestsError

    limiter = RateLimiter(10)
    try:
        limiter.process(lambda: None)
    except TooManyRequestsError:
        ...

    from interview_tasks.profile_cache import Profile, ProfileCache

    with ProfileCache() as profiles:
        profiles.set_update_profile("user-1", Profile(uuid="user-1", name="Ann"))
        profiles.get_profile("user-1")   # the profile, for the next two seconds

## The key-value server

Start it with:

    interview-tasks-server

Options: `--host` (default `localhost`) and `--port` (default `8080`). It
serves:

- `POST /put` with `{"key": "...", "value": "..."}`: stores the value and
  replies `"success"`, or status 400 if the body is not a valid JSON object
  with string fields.
- `POST /get` with `{"key": "..."}`: replies with the stored value, or
  status 400 if the key is missing or the body is not valid JSON.
- `GET /put-counter` and `GET /get-counter`: the number of put and get
  requests accepted so far.

Other paths answer 404, a wrong method 405. Stop it with Ctrl+C or SIGTERM.
Stored values live in memory only and are lost when the server stops.