from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportConfig:
    indent: int = 2
    encoding: str = "utf-8"


DEFAULT_EXPORT_CONFIG = ExportConfig()
