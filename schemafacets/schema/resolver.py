from __future__ import annotations

from typing import FrozenSet, Optional

import structlog

from schemafacets import settings
from schemafacets.schema import field

__all__ = ("resolve_type",)

logger = structlog.get_logger(__name__)


def resolve_type(
    node: field.SchemaNodeT,
    repository: field.SchemaRepository,
    *,
    max_depth: Optional[int] = None,
) -> Optional[field.SchemaType]:
    """Resolve the effective primitive type of a schema node.

    Refs are followed through the `repository`; compositions (`allOf`) are scanned
    in declaration order and the first sub-schema with a known type wins.

    An unresolvable ref, an empty composition, a cyclic chain of refs, or a chain
    deeper than `max_depth` all resolve to `None`, which should be treated as an
    unknown, scalar type.

    Parameters
    ----------
    node
        The schema node (or ref) to resolve.
    repository
        The definitions used to look up refs.
    max_depth
        Optional override of `Settings.max_resolve_depth`.
    """
    if max_depth is None:
        max_depth = settings.get_settings().max_resolve_depth
    return _resolve(node, repository, frozenset(), max_depth)


def _resolve(
    node: field.SchemaNodeT,
    repository: field.SchemaRepository,
    seen: FrozenSet[str],
    remaining: int,
) -> Optional[field.SchemaType]:
    if remaining < 0:
        logger.debug("resolve.depth_exceeded", node=node)
        return None

    if field.is_reference(node):
        if node.id in seen:
            logger.debug("resolve.cycle", ref=node.ref)
            return None
        definition = repository.lookup(node.id)
        if definition is None:
            logger.debug("resolve.unresolved", ref=node.ref)
            return None
        return _resolve(definition, repository, seen | {node.id}, remaining - 1)

    if node.allOf:
        for sub in node.allOf:
            t = _resolve(sub, repository, seen, remaining - 1)
            if t is not None:
                return t

    return node.type
