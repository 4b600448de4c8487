"""Public package surface for stagepick.

Exports ``main`` for programmatic CLI invocation. The reusable checkbox
prompt lives in ``stagepick.checkbox``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
