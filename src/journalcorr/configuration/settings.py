"""Typed settings management for journalcorr.

Wraps user configuration in Pydantic models so CLI commands can rely on
validated settings. Settings persist as JSON and can be overridden with
``JOURNALCORR_*`` environment variables.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from journalcorr.analysis.config import CorrelationConfig, DegeneratePolicy
from journalcorr.errors import InvalidConfigError, MissingConfigError


DEFAULT_CONFIG_PATH = Path.home() / ".journalcorr" / "config.json"


class AnalysisSettings(BaseModel):
    """Defaults for correlation ranking."""

    threshold: float = Field(0.1, ge=0.0, le=1.0, description="Minimum |phi| to report")
    sort_by_magnitude: bool = Field(False, description="Order results strongest first")
    degenerate_policy: DegeneratePolicy = Field(
        DegeneratePolicy.SKIP, description="Handling of undefined coefficients"
    )
    strict_events: bool = Field(False, description="Reject events absent from the journal")

    def to_config(self) -> CorrelationConfig:
        return CorrelationConfig(
            threshold=self.threshold,
            sort_by_magnitude=self.sort_by_magnitude,
            degenerate_policy=self.degenerate_policy,
            strict_events=self.strict_events,
        )


class Settings(BaseModel):
    """Root configuration state."""

    journal_path: Optional[Path] = Field(
        None, description="Journal to analyse; the bundled reference journal when unset"
    )
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if missing or invalid."""

    if not path.exists():
        raise MissingConfigError(
            f"Settings file not found at {path}", details={"path": str(path)}
        )
    try:
        payload = json.loads(path.read_text())
        return Settings.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise InvalidConfigError(
            f"Invalid configuration: {exc}", details={"path": str(path)}
        ) from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2))


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
    persist: bool = True,
) -> Settings:
    """Create or load settings respecting overrides and environment.

    A missing settings file is created with defaults unless ``persist`` is
    False.
    """

    overrides = overrides or {}

    if path.exists():
        settings = load_settings(path)
    else:
        settings = Settings()
        if persist:
            save_settings(settings, path)

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides)
    merged = _apply_env_overrides(merged)

    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _apply_overrides(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    _set_env_override(data, "journal_path", "JOURNALCORR_JOURNAL_PATH")

    analysis = data.setdefault("analysis", {})
    _set_env_override(analysis, "threshold", "JOURNALCORR_THRESHOLD", cast_float=True)
    _set_env_override(analysis, "sort_by_magnitude", "JOURNALCORR_SORT_BY_MAGNITUDE", cast_bool=True)
    _set_env_override(analysis, "degenerate_policy", "JOURNALCORR_DEGENERATE_POLICY")
    _set_env_override(analysis, "strict_events", "JOURNALCORR_STRICT_EVENTS", cast_bool=True)
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_float: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_float:
        try:
            mapping[key] = float(raw)
        except ValueError as exc:
            raise InvalidConfigError(
                f"{env_name} must be a number, got {raw!r}",
                details={"variable": env_name},
            ) from exc
    else:
        mapping[key] = raw
