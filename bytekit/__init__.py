"""Small utilities: wyhash, random numbers, string helpers, a buffer cache, logging, a sharded lock and a task pool."""

__version__ = "0.1.0"

__all__ = ["wyhash", "fastrand", "stringx", "mcache", "logger", "syncx", "gopool"]