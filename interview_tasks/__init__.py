"""TTL and LRU caches, a rate limiter, a worker pool, iterable merging, a URL checker and a key-value HTTP service."""

__version__ = "0.1.0"