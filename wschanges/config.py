from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "wschanges.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    # visual width of a tab when counting spaces
    "tab_width": 4,
}

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class FormatterConfig:
    """Settings the change set needs from the formatter driving it."""
    tab_width: int = 4

    def __post_init__(self):
        if not isinstance(self.tab_width, int) or isinstance(self.tab_width, bool):
            raise ValueError(f"tab_width must be an integer, got {self.tab_width!r}")
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be positive, got {self.tab_width}")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> FormatterConfig:
        return cls(tab_width=raw.get("tab_width", _DEFAULT_CFG["tab_width"]))


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values override the defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> FormatterConfig:
    """
    Load formatter settings from a YAML file.

    • A missing file yields the defaults.
    • A missing schema_version is read as the current one.
    • Unknown keys are ignored.
    """
    if not path.exists():
        return FormatterConfig.from_dict(_DEFAULT_CFG)

    with path.open(encoding="utf-8") as f:
        raw: Dict[str, Any] = _yaml.load(f) or {}

    if not isinstance(raw, dict):
        raise RuntimeError(f"{path}: expected a mapping at the top level")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise RuntimeError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    return FormatterConfig.from_dict(_merge_defaults(raw))


__all__ = ["FormatterConfig", "load_config", "DEFAULT_CFG_FILE", "SCHEMA_VERSION"]
