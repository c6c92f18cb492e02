from __future__ import annotations

import pytest

from schemafacets import errors
from schemafacets.schema import field


@pytest.mark.suite(
    single=dict(given_type=field.SchemaType.STR, expected_primitive="string"),
    integer=dict(given_type=field.SchemaType.INT, expected_primitive="integer"),
    nullable=dict(
        given_type=field.SchemaType.STR | field.SchemaType.NULL,
        expected_primitive=["null", "string"],
    ),
    numeric_union=dict(
        given_type=field.SchemaType.INT | field.SchemaType.NUM,
        expected_primitive=["integer", "number"],
    ),
)
def test_schema_type_primitive(given_type, expected_primitive):
    # When
    primitive = given_type.primitive()
    # Then
    assert primitive == expected_primitive


def test_schema_type_str():
    # Given
    given_type = field.SchemaType.ARR | field.SchemaType.NULL
    # When
    rendered = str(given_type)
    # Then
    assert rendered == "array|null"


def test_ref_pointer():
    # Given
    given_ref = field.Ref("Pet")
    # Then
    assert given_ref.id == "Pet"
    assert given_ref.ref == "#/definitions/Pet"
    assert given_ref.primitive() == {"$ref": "#/definitions/Pet"}


def test_ref_custom_path():
    # Given
    given_ref = field.Ref("Pet", "components", "schemas")
    # Then
    assert given_ref.ref == "#/components/schemas/Pet"


def test_is_reference():
    assert field.is_reference(field.Ref("Pet"))
    assert not field.is_reference(field.SchemaNode())


def test_node_primitive_omits_absent_facets():
    # Given
    given_node = field.SchemaNode(
        type=field.SchemaType.STR,
        format="email",
        maxLength=64,
        allOf=[field.Ref("Contact"), field.SchemaNode(readOnly=True)],
    )
    expected_primitive = {
        "type": "string",
        "format": "email",
        "maxLength": 64,
        "allOf": [{"$ref": "#/definitions/Contact"}, {"readOnly": True}],
    }
    # When
    primitive = given_node.primitive()
    # Then
    assert primitive == expected_primitive


def test_node_is_mutable():
    # Given
    given_node = field.SchemaNode()
    # When
    given_node.minLength = 1
    # Then
    assert given_node.minLength == 1
    assert given_node.primitive() == {"minLength": 1}


def test_repository_lookup():
    # Given
    given_node = field.SchemaNode(type=field.SchemaType.OBJ)
    repository = field.SchemaRepository()
    # When
    ref = repository.add_definition("Pet", given_node)
    # Then
    assert ref == field.Ref("Pet")
    assert "Pet" in repository
    assert len(repository) == 1
    assert repository.lookup("Pet") is given_node
    assert repository.lookup("Owner") is None


def test_repository_same_definition_is_allowed():
    # Given
    given_node = field.SchemaNode(type=field.SchemaType.OBJ)
    repository = field.SchemaRepository({"Pet": given_node})
    # When
    repository.add_definition("Pet", given_node)
    # Then
    assert [*repository] == ["Pet"]


def test_repository_duplicate_definition():
    # Given
    repository = field.SchemaRepository({"Pet": field.SchemaNode()})
    # When/Then
    with pytest.raises(errors.DuplicateDefinitionError):
        repository.add_definition("Pet", field.SchemaNode())
