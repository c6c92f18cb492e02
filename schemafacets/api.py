from __future__ import annotations

from typing import Iterable, Optional

from schemafacets import routing, validation
from schemafacets.schema import field, resolver

__all__ = (
    "annotation_mapper",
    "apply_route_constraints",
    "apply_validation_attributes",
    "resolve_type",
    "route_mapper",
)


annotation_mapper = validation.AnnotationMapper()
route_mapper = routing.RouteConstraintMapper()


def apply_validation_attributes(
    node: field.SchemaNodeT,
    annotations: Iterable[validation.ValidationAnnotationT],
    repository: Optional[field.SchemaRepository] = None,
) -> None:
    """Add the facets implied by a member's validation annotations to `node`.

    Annotations are applied in the order given. Unknown annotations are skipped,
    as are annotations with unusable arguments (e.g. a `Range` whose limits can't
    be parsed). Refs are never mutated.

    Parameters
    ----------
    node
        The schema node describing the member. It is mutated in place.
    annotations
        The annotations declared on the member.
    repository
        The definitions used to resolve the node's type through refs and
        compositions. Length annotations apply to item counts when the node
        resolves to an array, else to string length.

    Examples
    --------
    >>> import schemafacets
    >>> node = schemafacets.SchemaNode(type=schemafacets.SchemaType.ARR)
    >>> schemafacets.apply_validation_attributes(node, [schemafacets.MinLength(1)])
    >>> node.minItems
    1
    """
    annotation_mapper.apply(node, annotations, repository)


def apply_route_constraints(
    node: field.SchemaNodeT,
    constraints: Iterable[routing.RouteConstraintT],
    repository: Optional[field.SchemaRepository] = None,
) -> None:
    """Add the facets implied by a route parameter's constraints to `node`.

    Examples
    --------
    >>> import schemafacets
    >>> node = schemafacets.SchemaNode()
    >>> schemafacets.apply_route_constraints(
    ...     node, [schemafacets.IntConstraint(), schemafacets.MinConstraint(1)]
    ... )
    >>> node.primitive()
    {'type': 'integer', 'minimum': '1'}
    """
    route_mapper.apply(node, constraints, repository)


resolve_type = resolver.resolve_type
