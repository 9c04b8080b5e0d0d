"""Runtime settings.

Defaults follow the interactive menu tool. Environment variables override
defaults; command-line flags override both (see cli.py).
"""

from __future__ import annotations
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, Optional

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    store_path: Path = Path("latestValues.txt")
    default_data_path: Path = Path("data.txt")
    max_errors_shown: int = 10
    raw_view_limit: int = 200
    strict_tokens: bool = False
    color: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            store_path=Path(env.get("FLIGHT_CHECK_STORE") or base.store_path),
            default_data_path=Path(env.get("FLIGHT_CHECK_DATA") or base.default_data_path),
            max_errors_shown=base.max_errors_shown,
            raw_view_limit=base.raw_view_limit,
            strict_tokens=env.get("FLIGHT_CHECK_STRICT", "").strip().lower() in _TRUE,
            # https://no-color.org: any non-empty value disables color
            color=not env.get("NO_COLOR"),
        )
