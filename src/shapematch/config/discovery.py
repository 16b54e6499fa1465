"""Config file discovery.

Walk-up finder locates shapematch.toml, similar to how git finds .git/.
Supports SHAPEMATCH_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "shapematch.toml"
CONFIG_ENV_VAR = "SHAPEMATCH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for shapematch.toml.

    Returns the path to the config file, or None if not found.
    Checks SHAPEMATCH_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
