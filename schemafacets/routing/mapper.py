from __future__ import annotations

from schemafacets import numeric
from schemafacets.core import mapper
from schemafacets.routing import types
from schemafacets.schema import field

__all__ = ("TYPE_MARKERS", "RouteConstraintMapper")


TYPE_MARKERS = {
    types.RouteConstraintKind.FLOAT: field.SchemaType.NUM,
    types.RouteConstraintKind.DECIMAL: field.SchemaType.NUM,
    types.RouteConstraintKind.LONG: field.SchemaType.INT,
    types.RouteConstraintKind.INT: field.SchemaType.INT,
    types.RouteConstraintKind.GUID: field.SchemaType.STR,
    types.RouteConstraintKind.STRING: field.SchemaType.STR,
    types.RouteConstraintKind.BOOL: field.SchemaType.BOOL,
}
"""The schema type declared by each type-only route constraint."""


class RouteConstraintMapper(
    mapper.AbstractFacetMapper[types.RouteConstraintT, types.RouteConstraintKind]
):
    """Map the constraints on a route parameter onto a schema node.

    Type-only constraints overwrite the node's type, so when several are given the
    last one wins.
    """

    kind_type = types.RouteConstraintKind

    def _get_handlers(self):
        handlers = {
            types.RouteConstraintKind.MIN: self._from_min,
            types.RouteConstraintKind.MAX: self._from_max,
            types.RouteConstraintKind.MIN_LENGTH: self._from_min_length,
            types.RouteConstraintKind.MAX_LENGTH: self._from_max_length,
            types.RouteConstraintKind.LENGTH: self._from_length,
            types.RouteConstraintKind.RANGE: self._from_range,
            types.RouteConstraintKind.REGEX: self._from_regex,
        }
        handlers.update(dict.fromkeys(TYPE_MARKERS, self._from_type_marker))
        return handlers

    def _from_min(self, node: field.SchemaNode, c: types.MinConstraint, repository):
        node.minimum = numeric.to_invariant_string(c.min)

    def _from_max(self, node: field.SchemaNode, c: types.MaxConstraint, repository):
        node.maximum = numeric.to_invariant_string(c.max)

    def _from_min_length(
        self, node: field.SchemaNode, c: types.MinLengthConstraint, repository
    ):
        self._apply_min_size(node, c.min_length, repository)

    def _from_max_length(
        self, node: field.SchemaNode, c: types.MaxLengthConstraint, repository
    ):
        self._apply_max_size(node, c.max_length, repository)

    def _from_length(
        self, node: field.SchemaNode, c: types.LengthConstraint, repository
    ):
        # Route segments are always text.
        node.minLength = c.min_length
        node.maxLength = c.max_length

    def _from_range(
        self, node: field.SchemaNode, c: types.RangeConstraint, repository
    ):
        node.maximum = numeric.to_invariant_string(c.max)
        node.minimum = numeric.to_invariant_string(c.min)

    def _from_regex(self, node: field.SchemaNode, c: types.RegexConstraint, repository):
        node.pattern = c.pattern

    def _from_type_marker(self, node: field.SchemaNode, c, repository):
        node.type = TYPE_MARKERS[c.kind]
