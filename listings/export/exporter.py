from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..errors import WriteError
from .config import DEFAULT_EXPORT_CONFIG, ExportConfig

logger = logging.getLogger(__name__)


def _serialise(results: Any, config: ExportConfig) -> str:
    if isinstance(results, str):
        return results
    if isinstance(results, BaseModel):
        results = results.model_dump(mode="json")
    return json.dumps(results, indent=config.indent, ensure_ascii=False, default=str)


def export_results(
    results: Any,
    path: str | Path,
    config: ExportConfig = DEFAULT_EXPORT_CONFIG,
) -> Path:
    """
    Write results to ``path``, replacing any existing content.

    Strings are written as-is; models, dicts and lists become indented JSON.
    Raises WriteError if the file cannot be written.
    """
    destination = Path(path)
    output = _serialise(results, config)

    try:
        destination.write_text(output, encoding=config.encoding)
    except OSError as exc:
        logger.error("Failed to export results to %s", destination, exc_info=True)
        raise WriteError(f"Could not write results to {destination}: {exc}") from exc

    logger.info("Exported results to %s", destination)
    return destination
