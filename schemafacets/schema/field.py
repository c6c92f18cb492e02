from __future__ import annotations

import dataclasses
import enum
import reprlib
from typing import Any, Dict, Iterator, List, Optional, Union

from schemafacets import errors, util

__all__ = (
    "Ref",
    "SchemaNode",
    "SchemaNodeT",
    "SchemaRepository",
    "SchemaType",
    "StringFormat",
    "is_reference",
)

slotted = util.slotted(dict=False, weakref=True)


class SchemaType(enum.Flag):
    """The primitive types supported by JSON Schema.

    A node may describe a union of types by combining flags, i.e. `STR | NULL`.

    See Also
    --------
    `JSON Schema Types <https://json-schema.org/understanding-json-schema/reference/type.html>`_
    """

    STR = enum.auto()
    NUM = enum.auto()
    INT = enum.auto()
    BOOL = enum.auto()
    ARR = enum.auto()
    OBJ = enum.auto()
    NULL = enum.auto()

    @property
    def names(self) -> tuple[str, ...]:
        """The JSON Schema names of every type flagged on this value."""
        return (*(name for t, name in _TYPE_NAMES.items() if t in self),)

    def primitive(self) -> Union[str, List[str]]:
        names = self.names
        if len(names) == 1:
            return names[0]
        return sorted(names)

    def __str__(self) -> str:
        return "|".join(self.names)


_TYPE_NAMES = {
    SchemaType.STR: "string",
    SchemaType.NUM: "number",
    SchemaType.INT: "integer",
    SchemaType.BOOL: "boolean",
    SchemaType.ARR: "array",
    SchemaType.OBJ: "object",
    SchemaType.NULL: "null",
}


class StringFormat(str, enum.Enum):
    """The string 'formats' which may be assigned to a schema node.

    Covers the official JSON Schema formats, the OpenAPI `byte`/`binary` formats,
    and the free-form hints used for common data kinds.

    See Also
    --------
    `JSON Schema Strings <https://json-schema.org/understanding-json-schema/reference/string.html>`_
    """

    TIME = "time"
    DATE = "date"
    DTIME = "date-time"
    DURATION = "duration"
    URI = "uri"
    EMAIL = "email"
    BYTE = "byte"
    BINARY = "binary"
    PASSWORD = "password"
    TEL = "tel"
    CURRENCY = "currency"
    TEXT = "string"
    HTML = "html"
    MULTILINE = "multiline"
    CREDIT_CARD = "credit-card"
    POSTAL_CODE = "postal-code"

    def __str__(self) -> str:
        return self.value


@slotted
@dataclasses.dataclass(frozen=True)
class Ref:
    """A JSON Schema ref (pointer).

    Usually for directing a validator to another schema definition.
    """

    title: str
    ref: str = dataclasses.field(init=False, repr=False)

    def __init__(self, title: str, *path: str):
        path = path or ("definitions",)
        pathstr = "/".join(path)
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "ref", f"#/{pathstr}/{self.title}")

    @property
    def id(self) -> str:
        return self.title

    def primitive(self) -> Dict[str, Any]:
        return {"$ref": self.ref}


@slotted
@dataclasses.dataclass(repr=False)
class SchemaNode:
    """A mutable JSON Schema node.

    Every facet is optional. Numeric bounds are held as locale-independent
    decimal strings, e.g. `"1.5"`, so that they are emitted without rounding.
    """

    type: Optional[SchemaType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    format: Optional[str] = None
    pattern: Optional[str] = None
    minLength: Optional[int] = None
    maxLength: Optional[int] = None
    minItems: Optional[int] = None
    maxItems: Optional[int] = None
    minimum: Optional[str] = None
    maximum: Optional[str] = None
    exclusiveMinimum: Optional[str] = None
    exclusiveMaximum: Optional[str] = None
    readOnly: Optional[bool] = None
    allOf: Optional[List[SchemaNodeT]] = None

    def primitive(self) -> Dict[str, Any]:
        """Get a plain-dict view of this node, omitting any absent facets."""
        out: Dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "type":
                value = value.primitive()
            elif f.name == "allOf":
                value = [sub.primitive() for sub in value]
            out[f.name] = value
        return out

    @reprlib.recursive_repr()
    def __repr__(self) -> str:  # pragma: nocover
        vars = ", ".join(
            f"{f.name}={v!r}"
            for f in dataclasses.fields(self)
            if (v := getattr(self, f.name)) is not None
        )

        return f"{self.__class__.__name__}({vars})"


SchemaNodeT = Union[SchemaNode, Ref]
"""A type-alias for anything which may sit in a schema position."""


def is_reference(node: SchemaNodeT) -> bool:
    return isinstance(node, Ref)


class SchemaRepository:
    """A registry of named schema definitions, used to resolve refs."""

    __slots__ = ("schemas",)

    def __init__(self, schemas: Dict[str, SchemaNode] = None):
        self.schemas: Dict[str, SchemaNode] = {**(schemas or {})}

    def __repr__(self):
        return f"<{self.__class__.__name__}(definitions={(*self.schemas,)})>"

    def __contains__(self, id: object) -> bool:
        return id in self.schemas

    def __len__(self) -> int:
        return len(self.schemas)

    def __iter__(self) -> Iterator[str]:
        return iter(self.schemas)

    def lookup(self, id: str) -> Optional[SchemaNode]:
        return self.schemas.get(id)

    def add_definition(self, id: str, node: SchemaNode) -> Ref:
        """Register `node` under `id` and return a ref which points to it."""
        existing = self.schemas.get(id)
        if existing is not None and existing is not node:
            raise errors.DuplicateDefinitionError(
                f"A different definition is already registered for {id!r}."
            )
        self.schemas[id] = node
        return Ref(id)
