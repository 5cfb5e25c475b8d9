"""Entry point for running the test adapter as a module.

Usage:
    python -m pbbridge.test_adapter <command> [options]
"""

import os
import sys
from pathlib import Path

from pbbridge.adapter.cli import main
from pbbridge.adapter.commands import STDIN_COMMANDS
from pbbridge.test_adapter.store import FilePasteboardStore, MemoryPasteboardStore

STORE_ENV_VAR = "PBBRIDGE_TEST_STORE"

# Only these rewrite the store file; concurrent readers never touch it
MUTATING_COMMANDS = STDIN_COMMANDS | {"clear"}


def run(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    store_path = os.environ.get(STORE_ENV_VAR)
    if not store_path:
        return main(argv, opener=MemoryPasteboardStore())

    store = FilePasteboardStore(Path(store_path))
    exit_code = main(argv, opener=store)
    if argv and argv[0] in MUTATING_COMMANDS:
        store.save()
    return exit_code


if __name__ == "__main__":
    sys.exit(run())
