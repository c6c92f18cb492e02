from __future__ import annotations

import schemafacets


def test_apply_validation_attributes():
    # Given
    given_node = schemafacets.SchemaNode(type=schemafacets.SchemaType.STR)
    given_annotations = [
        schemafacets.StringLength(64, minimum_length=1),
        schemafacets.DataType(schemafacets.DataKind.EMAIL_ADDRESS),
        schemafacets.Description("The user's contact address."),
        schemafacets.ReadOnly(),
    ]
    expected_facets = {
        "type": "string",
        "description": "The user's contact address.",
        "format": "email",
        "minLength": 1,
        "maxLength": 64,
        "readOnly": True,
    }
    # When
    result = schemafacets.apply_validation_attributes(given_node, given_annotations)
    # Then
    assert result is None
    assert given_node.primitive() == expected_facets


def test_apply_validation_attributes_with_repository():
    # Given
    repository = schemafacets.SchemaRepository()
    ref = repository.add_definition(
        "Tags", schemafacets.SchemaNode(type=schemafacets.SchemaType.ARR)
    )
    given_node = schemafacets.SchemaNode(allOf=[ref])
    # When
    schemafacets.apply_validation_attributes(
        given_node, [schemafacets.Length(1, 3)], repository
    )
    # Then
    assert (given_node.minItems, given_node.maxItems) == (1, 3)


def test_apply_route_constraints():
    # Given
    given_node = schemafacets.SchemaNode()
    given_constraints = [
        schemafacets.LongConstraint(),
        schemafacets.RangeConstraint(1, 100),
    ]
    # When
    result = schemafacets.apply_route_constraints(given_node, given_constraints)
    # Then
    assert result is None
    assert given_node.primitive() == {
        "type": "integer",
        "minimum": "1",
        "maximum": "100",
    }


def test_resolve_type():
    # Given
    repository = schemafacets.SchemaRepository(
        {"Age": schemafacets.SchemaNode(type=schemafacets.SchemaType.INT)}
    )
    given_node = schemafacets.SchemaNode(
        allOf=[schemafacets.SchemaNode(), schemafacets.Ref("Age")]
    )
    # When
    resolved = schemafacets.resolve_type(given_node, repository)
    # Then
    assert resolved == schemafacets.SchemaType.INT


def test_mappers_are_shared():
    assert isinstance(schemafacets.annotation_mapper, schemafacets.AnnotationMapper)
    assert isinstance(schemafacets.route_mapper, schemafacets.RouteConstraintMapper)


def test_apply_validation_attributes_range():
    # Given
    given_node = schemafacets.SchemaNode(type=schemafacets.SchemaType.NUM)
    # When
    schemafacets.apply_validation_attributes(
        given_node, [schemafacets.Range(1, 10, maximum_is_exclusive=True)]
    )
    # Then
    assert given_node.primitive() == {
        "type": "number",
        "minimum": "1",
        "maximum": "10",
        "exclusiveMaximum": "10",
    }
