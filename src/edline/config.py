"""Editor configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from edline.runtime import telemetry

ENV_PREFIX = "EDLINE_"


@dataclass(frozen=True)
class EditorConfig:
    """Settings for the interactive front ends."""

    prompt: str = ""
    insert_terminator: str = "."
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.insert_terminator:
            raise ValueError("insert_terminator cannot be empty")
        if self.log_preset is not None and self.log_preset not in telemetry.PRESETS:
            raise ValueError(f"Unknown log preset '{self.log_preset}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        return cls(
            prompt=env.get(f"{ENV_PREFIX}PROMPT", ""),
            insert_terminator=env.get(f"{ENV_PREFIX}INSERT_TERMINATOR", "."),
            log_preset=env.get(f"{ENV_PREFIX}LOG_PRESET") or None,
        )

    def override(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})


__all__ = ["EditorConfig"]
