"""Allow ``python -m gerlib`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gerlib`` behaves identically to the ``ger`` console
script.
"""

from __future__ import annotations

from gerlib.cli.app import cli

if __name__ == "__main__":
    cli()
