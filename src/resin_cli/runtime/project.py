"""Find the built image of a project and name its container."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from resin_cli.errors import ImageNotFoundError

logger = logging.getLogger(__name__)

CONTAINER_PREFIX = "resin_"
IMAGE_MARKER = Path(".resin") / "image"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")


def locate_image(project_path: Path) -> str:
    """Return the image id recorded by ``resin build`` for *project_path*.

    Raises:
        ImageNotFoundError: If the marker file is missing, unreadable or empty.
    """
    marker = project_path / IMAGE_MARKER
    try:
        image_id = marker.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise ImageNotFoundError(marker) from exc

    if not image_id:
        raise ImageNotFoundError(marker)

    logger.debug("Found image %s in %s", image_id, marker)
    return image_id


def derive_name(project_path: Path) -> str:
    """Container name for a project: ``resin_`` plus the sanitized directory name.

    The path is made absolute lexically; symlinks are not followed, so a
    project keeps its name whatever the link points at.
    """
    base = Path(os.path.abspath(project_path)).name
    return CONTAINER_PREFIX + _UNSAFE_NAME_CHARS.sub("", base)
