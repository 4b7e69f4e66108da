from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root .env first, then one next to the package.
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
    ]

    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over the file.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Environment loaded from %s", path)
