"""Allow ``python -m lein_phonics`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m lein_phonics`` behaves identically to the ``lein-phonics``
console script.
"""

from __future__ import annotations

from lein_phonics.cli.app import cli

if __name__ == "__main__":
    cli()
