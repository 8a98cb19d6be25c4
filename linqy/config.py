import os
from contextlib import contextmanager
from dataclasses import dataclass, replace, fields
from typing import Iterator


@dataclass(frozen=True)
class Settings:
    """process-wide switches for the capability checks"""
    # natively ordered values (int, str, tuple, ...) count as comparable
    natural_ordering: bool = True
    # immutable scalars (None, numbers, str, bytes) count as their own clones
    clone_immutables: bool = True


def _from_environment() -> Settings:
    strict = os.environ.get("LINQY_STRICT", "").strip().lower() in ("1", "true", "yes", "on")
    if strict:
        return Settings(natural_ordering=False, clone_immutables=False)
    return Settings()


_active = _from_environment()


def get_settings() -> Settings:
    return _active


def configure(**changes) -> Settings:
    """replace the active settings. unknown names raise TypeError."""
    global _active
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    _active = replace(_active, **changes)
    return _active


@contextmanager
def override(**changes) -> Iterator[Settings]:
    """temporarily apply settings, restoring the previous ones on exit"""
    global _active
    previous = _active
    try:
        yield configure(**changes)
    finally:
        _active = previous
