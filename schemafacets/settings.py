from __future__ import annotations

import dataclasses
import os
from typing import Mapping

import babel
import structlog

from schemafacets import errors, util

__all__ = ("PREFIX", "Settings", "configure", "get_settings")

logger = structlog.get_logger(__name__)

PREFIX = "SCHEMAFACETS_"
FALLBACK_CULTURE = "en_US"


def _default_culture() -> str:
    return babel.default_locale("LC_NUMERIC") or FALLBACK_CULTURE


def _normalize_culture(value: str) -> str:
    sep = "-" if "-" in value else "_"
    try:
        return str(babel.Locale.parse(value, sep=sep))
    except (ValueError, TypeError, babel.UnknownLocaleError) as e:
        raise errors.SettingsValueError(
            f"Unknown culture {value!r}: {e}"
        ) from e


@util.slotted
@dataclasses.dataclass(frozen=True)
class Settings:
    """Runtime settings for schemafacets.

    The resolution order of values is `default(s) -> env value(s) -> passed value(s)`.

    Parameters
    ----------
    culture
        The ambient culture used to parse string-form numeric limits which do not
        request the invariant culture, e.g. `de_DE`.
        Read from `SCHEMAFACETS_CULTURE`.
    max_resolve_depth
        How deep type resolution may follow refs and compositions before giving up.
        Read from `SCHEMAFACETS_MAX_RESOLVE_DEPTH`.
    """

    culture: str = dataclasses.field(default_factory=_default_culture)
    max_resolve_depth: int = 32

    def __post_init__(self):
        object.__setattr__(self, "culture", _normalize_culture(self.culture))
        if (
            not isinstance(self.max_resolve_depth, int)
            or isinstance(self.max_resolve_depth, bool)
            or self.max_resolve_depth < 1
        ):
            raise errors.SettingsValueError(
                "Setting <max_resolve_depth> must be a positive integer, "
                f"got {self.max_resolve_depth!r}."
            )

    @classmethod
    def from_env(
        cls, *, environ: Mapping[str, str] = None, prefix: str = PREFIX, **overrides
    ) -> Settings:
        environ = os.environ if environ is None else environ
        values: dict = {}
        culture = environ.get(f"{prefix}CULTURE")
        if culture:
            values["culture"] = culture
        depth = environ.get(f"{prefix}MAX_RESOLVE_DEPTH")
        if depth:
            try:
                values["max_resolve_depth"] = int(depth)
            except ValueError as e:
                raise errors.SettingsValueError(
                    f"Couldn't parse {prefix}MAX_RESOLVE_DEPTH={depth!r} as an integer."
                ) from e
        values.update(overrides)
        return cls(**values)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the active settings, reading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**overrides) -> Settings:
    """Replace the active settings with a copy containing `overrides`."""
    global _settings
    _settings = dataclasses.replace(get_settings(), **overrides)
    logger.debug("settings.configured", **dataclasses.asdict(_settings))
    return _settings
