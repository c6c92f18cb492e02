from __future__ import annotations

import abc
import enum
from typing import Callable, ClassVar, Dict, Generic, Iterable, Optional, Type, TypeVar

import structlog

from schemafacets import util
from schemafacets.schema import field, resolver

__all__ = ("AbstractFacetMapper", "ItemT", "KindT")

logger = structlog.get_logger(__name__)


ItemT = TypeVar("ItemT")
KindT = TypeVar("KindT", bound=enum.Enum)

_HandlerT = Callable[[field.SchemaNode, ItemT, field.SchemaRepository], None]


class AbstractFacetMapper(abc.ABC, Generic[ItemT, KindT]):
    """The base interface for mapping declared rules onto a schema node.

    Each rule carries a `kind` tag. Sub-classes declare the enumeration of kinds
    they understand and provide a handler for each; rules of any other kind are
    skipped, so new kinds never break existing mappings.

    The node passed to :py:meth:`apply` is owned by the caller and is mutated in
    place. Mappers keep no reference to it once the call returns.
    """

    kind_type: ClassVar[Type[enum.Enum]]

    def __init__(self):
        self._KIND_TO_HANDLER: Dict[KindT, _HandlerT] = self._get_handlers()
        missing = {*self.kind_type} - {*self._KIND_TO_HANDLER}
        if missing:
            raise TypeError(
                f"{self.__class__.__qualname__} has no handler for kind(s): "
                f"{', '.join(sorted(k.name for k in missing))}."
            )

    def __repr__(self):
        return f"<{self.__class__.__name__}(kinds={util.get_name(self.kind_type)})>"

    def apply(
        self,
        node: field.SchemaNodeT,
        items: Iterable[ItemT],
        repository: Optional[field.SchemaRepository] = None,
    ) -> None:
        """Apply each rule in `items` to `node`, in order."""
        if field.is_reference(node):
            logger.debug("mapper.skip_reference", ref=node.ref)
            return

        repository = field.SchemaRepository() if repository is None else repository
        for item in items:
            kind = getattr(item, "kind", None)
            if not isinstance(kind, self.kind_type):
                logger.debug(
                    "mapper.ignored", mapper=self.__class__.__name__, item=item
                )
                continue
            handler = self._KIND_TO_HANDLER[kind]
            handler(node, item, repository)

    @staticmethod
    def _is_array(node: field.SchemaNode, repository: field.SchemaRepository) -> bool:
        t = resolver.resolve_type(node, repository)
        return t is not None and field.SchemaType.ARR in t

    def _apply_min_size(
        self, node: field.SchemaNode, size: int, repository: field.SchemaRepository
    ):
        if self._is_array(node, repository):
            node.minItems = size
        else:
            node.minLength = size

    def _apply_max_size(
        self, node: field.SchemaNode, size: int, repository: field.SchemaRepository
    ):
        if self._is_array(node, repository):
            node.maxItems = size
        else:
            node.maxLength = size

    @abc.abstractmethod
    def _get_handlers(self) -> Dict[KindT, _HandlerT]:
        ...
