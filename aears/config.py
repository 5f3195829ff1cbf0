"""AEARS pipeline configuration.

Typed configuration for the whole library.  Settings use Pydantic v2 models so
they are validated at construction time and can be serialised to/from JSON or
environment variables.  Every validation failure is reported as a
:class:`~aears.exceptions.ConfigurationError` naming all invalid fields.
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from aears.exceptions import ConfigurationError
from aears.processor.models import SUPPORTED_DOMAINS, OutputFormat


class AearsConfig(BaseModel):
    """Global AEARS library configuration.

    Only ``default_domains`` feeds the extraction pipeline directly (it is the
    domain list used for coverage when a call does not name its own).  The
    remaining settings are read by the cache, the stream orchestrator and
    the output formatters.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    default_domains: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_DOMAINS[:4]),
        description="Domains reported in coverage when a call names none",
    )
    max_cache_size: int = Field(default=100, ge=0, strict=True, description="0 disables caching")
    enable_streaming: bool = Field(default=True, strict=True)
    quality_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    output_format: OutputFormat = Field(default="json")

    @field_validator("default_domains")
    @classmethod
    def _check_domains(cls, value: list[str]) -> list[str]:
        invalid = [d for d in value if d not in SUPPORTED_DOMAINS]
        if invalid:
            raise ValueError(
                f"Invalid domains: {', '.join(invalid)}. "
                f"Supported domains: {', '.join(SUPPORTED_DOMAINS)}"
            )
        return value

    @classmethod
    def from_env(cls) -> "AearsConfig":
        """Build an ``AearsConfig`` from environment variables.

        Recognised variables (all optional):
            AEARS_DEFAULT_DOMAINS (comma separated), AEARS_MAX_CACHE_SIZE,
            AEARS_ENABLE_STREAMING, AEARS_QUALITY_THRESHOLD, AEARS_OUTPUT_FORMAT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AEARS_DEFAULT_DOMAINS"):
            kwargs["default_domains"] = [
                d.strip() for d in os.environ["AEARS_DEFAULT_DOMAINS"].split(",") if d.strip()
            ]
        try:
            if os.environ.get("AEARS_MAX_CACHE_SIZE"):
                kwargs["max_cache_size"] = int(os.environ["AEARS_MAX_CACHE_SIZE"])
            if os.environ.get("AEARS_QUALITY_THRESHOLD"):
                kwargs["quality_threshold"] = float(os.environ["AEARS_QUALITY_THRESHOLD"])
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric environment value: {exc}") from exc
        if os.environ.get("AEARS_ENABLE_STREAMING"):
            kwargs["enable_streaming"] = os.environ["AEARS_ENABLE_STREAMING"].strip().lower() in (
                "1", "true", "yes", "on",
            )
        if os.environ.get("AEARS_OUTPUT_FORMAT"):
            kwargs["output_format"] = os.environ["AEARS_OUTPUT_FORMAT"]
        return build_config(kwargs)


def _invalid_fields(exc: ValidationError) -> list[str]:
    fields: list[str] = []
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "configuration"
        if name not in fields:
            fields.append(name)
    return fields


def build_config(settings: dict[str, Any], base: Optional[AearsConfig] = None) -> AearsConfig:
    """Validate *settings* on top of *base* (or the defaults).

    Raises:
        ConfigurationError: Listing every invalid or unknown field.
    """
    merged = {**(base.model_dump() if base is not None else {}), **settings}
    try:
        return AearsConfig.model_validate(merged)
    except ValidationError as exc:
        fields = _invalid_fields(exc)
        messages = "; ".join(f"{e['loc'][0] if e['loc'] else ''}: {e['msg']}" for e in exc.errors())
        raise ConfigurationError(
            f"Configuration validation failed: {messages}", fields
        ) from exc


# ---------------------------------------------------------------------------
# Configuration manager
# ---------------------------------------------------------------------------


class ConfigurationManager:
    """Holds the active configuration and applies validated partial updates.

    Updates are all-or-nothing: if any supplied field is invalid, the current
    configuration is left untouched.
    """

    def __init__(self, config: Optional[AearsConfig] = None) -> None:
        self._config = config.model_copy(deep=True) if config is not None else AearsConfig()

    def set_configuration(self, settings: Optional[dict[str, Any]] = None, **kwargs: Any) -> None:
        """Merge validated *settings* (and/or keyword settings) into the config."""
        updates = {**(settings or {}), **kwargs}
        self._config = build_config(updates, base=self._config)

    def get_configuration(self) -> AearsConfig:
        """Return a copy of the active configuration."""
        return self._config.model_copy(deep=True)

    def reset_configuration(self) -> None:
        self._config = AearsConfig()

    def get_value(self, key: str) -> Any:
        if key not in AearsConfig.model_fields:
            raise ConfigurationError(f"Unknown configuration key: {key}", [key])
        return getattr(self._config, key)

    def set_value(self, key: str, value: Any) -> None:
        self.set_configuration({key: value})

    def export_configuration(self) -> str:
        """Serialise the active configuration as pretty-printed JSON."""
        return self._config.model_dump_json(indent=2)

    def import_configuration(self, config_json: str) -> None:
        """Apply settings from a JSON document.

        Raises:
            ConfigurationError: If the text is not a JSON object or any field
                is invalid.
        """
        try:
            imported = json.loads(config_json)
        except json.JSONDecodeError as exc:
            raise ConfigurationError("Invalid JSON configuration", ["configuration"]) from exc
        if not isinstance(imported, dict):
            raise ConfigurationError("Invalid JSON configuration", ["configuration"])
        self.set_configuration(imported)

    # -- presets --------------------------------------------------------

    def enable_all_domains(self) -> None:
        self.set_configuration(default_domains=list(SUPPORTED_DOMAINS))

    def disable_cache(self) -> None:
        self.set_configuration(max_cache_size=0)

    def set_high_quality_mode(self) -> None:
        self.set_configuration(quality_threshold=0.8, max_cache_size=50)

    def set_performance_mode(self) -> None:
        self.set_configuration(enable_streaming=True, max_cache_size=200, quality_threshold=0.4)

    def get_summary(self) -> dict[str, Any]:
        """Human-oriented summary of the active settings."""
        cfg = self._config
        return {
            "domains": len(cfg.default_domains),
            "caching": f"Enabled ({cfg.max_cache_size} items)" if cfg.max_cache_size > 0 else "Disabled",
            "streaming": cfg.enable_streaming,
            "quality": f"{cfg.quality_threshold * 100:.0f}% threshold",
            "format": cfg.output_format,
        }
