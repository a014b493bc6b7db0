from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class SpecificityConfig:
    output_format: str = "text"  # "text" or "json"
    log_level: str = "WARNING"
