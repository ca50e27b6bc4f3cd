"""Public package surface for pairjump.

Exports ``main`` for programmatic CLI invocation. The matching engine
lives in ``pairjump.commands`` (``MatchEngine``) and its submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
