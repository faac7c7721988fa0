from __future__ import annotations
from pathlib import Path
from typing import TextIO

from doc_sidebar.services.renderer import render, render_text
from doc_sidebar.utils.errors import PublishError
from doc_sidebar.utils.io import atomic_write_text
from doc_sidebar.utils.logging import logger
from doc_sidebar.utils.typing import RenderConfig

def write_lines(config: RenderConfig, stream: TextIO) -> int:
    """Write the fragment to ``stream`` one line at a time, each newline-terminated."""
    count = 0
    for line in render(config):
        stream.write(line + "\n")
        count += 1
    logger.debug("publisher.write_lines: %d lines", count)
    return count

def publish(config: RenderConfig, path: Path) -> Path:
    path = Path(path)
    try:
        atomic_write_text(path, render_text(config))
    except (OSError, ValueError) as e:
        logger.error("publisher.publish failed for %s: %s", path, e)
        raise PublishError(f"Could not write sidebar fragment to {path}: {e}") from e
    logger.info("publisher.publish: %s", path)
    return path
