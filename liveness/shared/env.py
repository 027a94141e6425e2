"""Resolve ``KEY_FILE`` environment variables (Docker secret convention)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, MutableMapping, Optional

logger = logging.getLogger(__name__)


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Expose the contents of every ``KEY_FILE`` entry as ``KEY``.

    Connection descriptors such as ``MONGO_HOST`` or ``REDIS_HOST`` may
    carry credentials and are commonly mounted as secrets. A ``KEY`` that
    is already set wins over its ``KEY_FILE``. Unreadable files are logged
    and skipped.

    Returns:
        The names of the variables that were populated.
    """
    env = os.environ if environ is None else environ
    resolved: List[str] = []

    for key, file_path in list(env.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        resolved.append(target_key)

    return resolved


load_secret_file_variables()
