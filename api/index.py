"""Vercel entrypoint serving the pantry scanner API.

Vercel deploys the repository without installing it, so the ``src`` tree is
put on the import path before the application is assembled.
"""

import sys
from pathlib import Path


def _use_source_tree() -> None:
    source_dir = str(Path(__file__).resolve().parent.parent / "src")
    if source_dir not in sys.path:
        sys.path.insert(0, source_dir)


_use_source_tree()

from pantry_scanner.api.app import create_app  # noqa: E402
from pantry_scanner.containers import build_container  # noqa: E402

app = create_app(build_container())
