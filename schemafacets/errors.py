from __future__ import annotations

__all__ = (
    "AnnotationStateError",
    "AnnotationValueError",
    "ConstraintValueError",
    "ConversionNotSupportedError",
    "DuplicateDefinitionError",
    "FacetError",
    "SettingsValueError",
)


class FacetError(Exception):
    """The root exception for all schemafacets-related errors."""


class AnnotationValueError(FacetError, ValueError):
    """An annotation was declared with an argument which cannot be used."""

    pass


class AnnotationStateError(FacetError, RuntimeError):
    """An annotation is not in a state which allows its limits to be set up."""

    pass


class ConversionNotSupportedError(FacetError, NotImplementedError):
    """A converter is unable to produce the requested target type."""

    def __init__(self, source: type, target: type):
        self.source = source
        self.target = target
        super().__init__(
            f"Conversion from {source.__qualname__!r} "
            f"to {target.__qualname__!r} is not supported."
        )


class DuplicateDefinitionError(FacetError, KeyError):
    """A schema definition is already registered under the given id."""

    pass


class SettingsValueError(FacetError, ValueError):
    """An environment value could not be used for a setting."""

    pass


class ConstraintValueError(FacetError, ValueError):
    """A route constraint was declared with arguments which are out of range."""

    pass
