from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class ParserConfig:
    # Subtract [offset:] from every timestamp
    apply_offset: bool = True


DEFAULT_CONFIG = ParserConfig()


def load_config() -> ParserConfig:
    apply_offset = os.getenv("LRC_PARSER_APPLY_OFFSET", "1").strip().lower() not in ("0", "false", "no")
    return ParserConfig(apply_offset=apply_offset)
