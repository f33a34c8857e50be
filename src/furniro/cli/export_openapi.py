from __future__ import annotations

import json
import sys
from pathlib import Path

from furniro.api.app import app
from furniro.logging import get_logger

logger = get_logger(__name__)


def export_openapi(path: Path | str = "openapi.json") -> Path:
    """Write the OpenAPI document to disk for documentation or client generation."""
    destination = Path(path)
    payload = app.openapi()
    destination.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("OpenAPI schema written to %s", destination)
    return destination


def main() -> None:
    target = sys.argv[1] if len(sys.argv) > 1 else "openapi.json"
    export_openapi(target)


if __name__ == "__main__":
    main()
