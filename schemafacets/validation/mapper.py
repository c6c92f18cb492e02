from __future__ import annotations

from typing import Dict

import structlog

from schemafacets import converters, errors, numeric
from schemafacets.core import mapper
from schemafacets.schema import field
from schemafacets.validation import types

__all__ = ("DATA_FORMATS", "AnnotationMapper")

logger = structlog.get_logger(__name__)


DATA_FORMATS: Dict[types.DataKind, field.StringFormat] = {
    types.DataKind.DATE_TIME: field.StringFormat.DTIME,
    types.DataKind.DATE: field.StringFormat.DATE,
    types.DataKind.TIME: field.StringFormat.TIME,
    types.DataKind.DURATION: field.StringFormat.DURATION,
    types.DataKind.PHONE_NUMBER: field.StringFormat.TEL,
    types.DataKind.CURRENCY: field.StringFormat.CURRENCY,
    types.DataKind.TEXT: field.StringFormat.TEXT,
    types.DataKind.HTML: field.StringFormat.HTML,
    types.DataKind.MULTILINE_TEXT: field.StringFormat.MULTILINE,
    types.DataKind.EMAIL_ADDRESS: field.StringFormat.EMAIL,
    types.DataKind.PASSWORD: field.StringFormat.PASSWORD,
    types.DataKind.URL: field.StringFormat.URI,
    types.DataKind.IMAGE_URL: field.StringFormat.URI,
    types.DataKind.CREDIT_CARD: field.StringFormat.CREDIT_CARD,
    types.DataKind.POSTAL_CODE: field.StringFormat.POSTAL_CODE,
    types.DataKind.UPLOAD: field.StringFormat.BINARY,
}
"""The schema format implied by each kind of data. Custom kinds have none."""


class AnnotationMapper(
    mapper.AbstractFacetMapper[types.ValidationAnnotationT, types.AnnotationKind]
):
    """Map validation annotations declared on a model member onto a schema node."""

    kind_type = types.AnnotationKind

    def _get_handlers(self):
        return {
            types.AnnotationKind.DATA_TYPE: self._from_data_type,
            types.AnnotationKind.MIN_LENGTH: self._from_min_length,
            types.AnnotationKind.MAX_LENGTH: self._from_max_length,
            types.AnnotationKind.LENGTH: self._from_length,
            types.AnnotationKind.BASE64: self._from_base64,
            types.AnnotationKind.RANGE: self._from_range,
            types.AnnotationKind.REGULAR_EXPRESSION: self._from_regular_expression,
            types.AnnotationKind.STRING_LENGTH: self._from_string_length,
            types.AnnotationKind.READ_ONLY: self._from_read_only,
            types.AnnotationKind.DESCRIPTION: self._from_description,
        }

    def _from_data_type(
        self, node: field.SchemaNode, a: types.DataType, repository
    ) -> None:
        fmt = DATA_FORMATS.get(a.data_type)
        if fmt is not None:
            node.format = fmt.value

    def _from_min_length(
        self, node: field.SchemaNode, a: types.MinLength, repository
    ) -> None:
        self._apply_min_size(node, a.length, repository)

    def _from_max_length(
        self, node: field.SchemaNode, a: types.MaxLength, repository
    ) -> None:
        self._apply_max_size(node, a.length, repository)

    def _from_length(self, node: field.SchemaNode, a: types.Length, repository) -> None:
        self._apply_min_size(node, a.minimum_length, repository)
        self._apply_max_size(node, a.maximum_length, repository)

    def _from_base64(
        self, node: field.SchemaNode, a: types.Base64String, repository
    ) -> None:
        node.format = field.StringFormat.BYTE.value

    def _from_range(self, node: field.SchemaNode, a: types.Range, repository) -> None:
        # Probing with `None` forces any string limits to be parsed.
        try:
            a.is_valid(None)
        except (errors.AnnotationValueError, errors.AnnotationStateError) as e:
            logger.debug("range.invalid_limits", annotation=a, error=str(e))
            return

        if numeric.is_standard_number(a.minimum):
            minimum, maximum = a.minimum, a.maximum
        else:
            converter = converters.get_converter(a.operand_type)
            culture = a.culture
            try:
                maximum = converter.to_decimal(a.maximum, culture)
                minimum = converter.to_decimal(a.minimum, culture)
            except errors.ConversionNotSupportedError as e:
                logger.debug("range.unsupported_operand", annotation=a, error=str(e))
                return

        try:
            maximum, minimum = (
                numeric.to_invariant_string(maximum),
                numeric.to_invariant_string(minimum),
            )
        except errors.AnnotationValueError as e:
            logger.debug("range.unwritable_limits", annotation=a, error=str(e))
            return

        node.maximum = maximum
        node.minimum = minimum
        if a.maximum_is_exclusive:
            node.exclusiveMaximum = node.maximum
        if a.minimum_is_exclusive:
            node.exclusiveMinimum = node.minimum

    def _from_regular_expression(
        self, node: field.SchemaNode, a: types.RegularExpression, repository
    ) -> None:
        node.pattern = a.pattern

    def _from_string_length(
        self, node: field.SchemaNode, a: types.StringLength, repository
    ) -> None:
        node.minLength = a.minimum_length
        node.maxLength = a.maximum_length

    def _from_read_only(
        self, node: field.SchemaNode, a: types.ReadOnly, repository
    ) -> None:
        node.readOnly = a.is_read_only

    def _from_description(
        self, node: field.SchemaNode, a: types.Description, repository
    ) -> None:
        if node.description is None:
            node.description = a.description
