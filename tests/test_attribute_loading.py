import pytest

from product_taxonomy.core.attributes import Attribute, ExtendedAttribute, load_attributes
from product_taxonomy.core.errors import SourceSchemaError, TaxonomyValidationError
from product_taxonomy.core.values import Value, load_values
from tests.utils.taxonomy_data import ATTRIBUTES_YAML, load_yaml


def _load_invalid(content: str, values=None) -> TaxonomyValidationError:
    with pytest.raises(TaxonomyValidationError) as exc_info:
        load_attributes(load_yaml(content), values if values is not None else {})
    return exc_info.value


def test_loads_base_and_extended_attributes(values_by_friendly_id):
    attributes = load_attributes(load_yaml(ATTRIBUTES_YAML), values_by_friendly_id).hashed_by("friendly_id")

    assert len(attributes) == 3

    color = attributes["color"]
    assert isinstance(color, Attribute)
    assert color.handle == "color"
    assert isinstance(color.values, list)
    assert isinstance(color.values[0], Value)
    assert [v.friendly_id for v in color.values] == ["color__black"]

    pattern = attributes["pattern"]
    assert isinstance(pattern, Attribute)
    assert [v.friendly_id for v in pattern.values] == ["pattern__abstract"]

    clothing_pattern = attributes["clothing_pattern"]
    assert isinstance(clothing_pattern, ExtendedAttribute)
    assert not isinstance(clothing_pattern, Attribute)
    assert clothing_pattern.handle == "clothing_pattern"
    assert isinstance(clothing_pattern.values[0], Value)
    assert [v.friendly_id for v in clothing_pattern.values] == ["pattern__abstract"]


def test_result_keeps_base_then_extended_source_order(values_by_friendly_id):
    attributes = load_attributes(load_yaml(ATTRIBUTES_YAML), values_by_friendly_id)

    assert [a.friendly_id for a in attributes] == ["color", "pattern", "clothing_pattern"]
    assert [a.kind for a in attributes] == ["base", "base", "extended"]


def test_extended_attribute_shares_base_value_list(values_by_friendly_id):
    attributes = load_attributes(load_yaml(ATTRIBUTES_YAML), values_by_friendly_id).hashed_by("friendly_id")

    pattern = attributes["pattern"]
    clothing_pattern = attributes["clothing_pattern"]
    assert clothing_pattern.values is pattern.values
    assert clothing_pattern.base_attribute is pattern
    assert pattern.extended_attributes == [clothing_pattern]


def test_values_are_shared_with_the_value_index(values_index):
    attributes = load_attributes(load_yaml(ATTRIBUTES_YAML), values_index).hashed_by("friendly_id")

    assert attributes["color"].values[0] is values_index.hashed_by("friendly_id")["color__black"]


def test_raises_schema_error_for_flat_string():
    with pytest.raises(SourceSchemaError) as exc_info:
        load_attributes(load_yaml("---\nfoo=bar\n"), {})

    assert isinstance(exc_info.value, ValueError)
    assert not isinstance(exc_info.value, TaxonomyValidationError)


@pytest.mark.parametrize(
    "content",
    [
        "base_attributes: []\n",
        "extended_attributes: []\n",
        "base_attributes: foo\nextended_attributes: []\n",
        "base_attributes:\n- not a map\nextended_attributes: []\n",
    ],
)
def test_raises_schema_error_for_malformed_lists(content):
    with pytest.raises(SourceSchemaError):
        load_attributes(load_yaml(content), {})


def test_raises_schema_error_for_unknown_top_level_key():
    with pytest.raises(SourceSchemaError):
        load_attributes({"base_attributes": [], "extended_attributes": [], "extended_attribute": []}, {})


def test_numeric_value_references_resolve():
    values = load_values(
        load_yaml(
            """
            - id: 1
              name: 1984
              friendly_id: 1984
              handle: release_year__1984
            """
        )
    )

    attributes = load_attributes(
        load_yaml(
            """
            base_attributes:
            - id: 1
              name: Release year
              description: Year the product was released
              friendly_id: release_year
              handle: release_year
              values: [1984]
            extended_attributes: []
            """
        ),
        values,
    )

    assert [v.friendly_id for v in attributes[0].values] == ["1984"]


def test_incomplete_base_attribute_reports_every_missing_field():
    error = _load_invalid(
        """
        ---
        base_attributes:
        - id: 1
          name: Color
        extended_attributes: []
        """
    )

    assert error.model.errors.details == {
        "friendly_id": [{"error": "blank"}],
        "handle": [{"error": "blank"}],
        "description": [{"error": "blank"}],
        "values": [{"error": "blank"}],
    }


def test_empty_values_list_is_blank():
    error = _load_invalid(
        """
        ---
        base_attributes:
        - id: 1
          name: Color
          description: Defines the primary color or pattern, such as blue or striped
          friendly_id: color
          handle: color
          values: []
        extended_attributes: []
        """
    )

    assert error.model.errors.details == {"values": [{"error": "blank"}]}


def test_unknown_values_are_reported_once():
    error = _load_invalid(
        """
        ---
        base_attributes:
        - id: 1
          name: Color
          description: Defines the primary color or pattern, such as blue or striped
          friendly_id: color
          handle: color
          values:
          - foo
          - bar
        extended_attributes: []
        """
    )

    assert error.model.errors.details == {"values": [{"error": "not_found"}]}
    assert error.model.unresolved_value_ids == ["foo", "bar"]


def test_partially_resolved_values_are_not_found(values_by_friendly_id):
    error = _load_invalid(
        """
        base_attributes:
        - id: 1
          name: Color
          description: Defines the primary color
          friendly_id: color
          handle: color
          values:
          - color__black
          - color__mauve
        extended_attributes: []
        """,
        values_by_friendly_id,
    )

    assert error.model.errors.details == {"values": [{"error": "not_found"}]}


def test_incomplete_extended_attribute():
    error = _load_invalid(
        """
        ---
        base_attributes: []
        extended_attributes:
        - id: 2
          name: Clothing Color
          description: Defines the primary color or pattern, such as blue or striped
        """
    )

    assert isinstance(error.model, ExtendedAttribute)
    assert error.model.errors.details == {
        "friendly_id": [{"error": "blank"}],
        "handle": [{"error": "blank"}],
        "values_from": [{"error": "not_found"}],
    }


def test_extended_attribute_with_unknown_values_from():
    error = _load_invalid(
        """
        ---
        base_attributes: []
        extended_attributes:
        - id: 2
          name: Clothing Color
          description: Defines the primary color or pattern, such as blue or striped
          handle: clothing_color
          friendly_id: clothing_color
          values_from: foo
        """
    )

    assert error.model.errors.details == {"values_from": [{"error": "not_found"}]}


def test_extended_attribute_cannot_borrow_from_extended_attribute(values_by_friendly_id):
    content = ATTRIBUTES_YAML + (
        "- id: 5\n"
        "  name: Shirt Pattern\n"
        "  friendly_id: shirt_pattern\n"
        "  handle: shirt_pattern\n"
        "  values_from: clothing_pattern\n"
    )

    error = _load_invalid(content, values_by_friendly_id)

    assert error.model.friendly_id == "shirt_pattern"
    assert error.model.errors.details == {"values_from": [{"error": "not_found"}]}


def test_duplicate_friendly_ids_flag_the_later_attribute(values_by_friendly_id):
    error = _load_invalid(
        """
        ---
        base_attributes:
        - id: 1
          name: Color
          description: Defines the primary color or pattern, such as blue or striped
          friendly_id: color
          handle: color
          values:
          - color__black
        - id: 2
          name: Pattern
          description: Describes the design or motif of a product, such as floral or striped
          friendly_id: color
          handle: pattern
          values:
          - pattern__abstract
        extended_attributes: []
        """,
        values_by_friendly_id,
    )

    assert error.model.handle == "pattern"
    assert error.model.errors.details == {"friendly_id": [{"error": "taken"}]}


def test_extended_attribute_friendly_id_must_not_collide_with_base(values_by_friendly_id):
    content = ATTRIBUTES_YAML.replace("friendly_id: clothing_pattern", "friendly_id: color")

    error = _load_invalid(content, values_by_friendly_id)

    assert isinstance(error.model, ExtendedAttribute)
    assert error.model.errors.details == {"friendly_id": [{"error": "taken"}]}


def test_non_numeric_id(values_by_friendly_id):
    error = _load_invalid(
        """
        ---
        base_attributes:
        - id: foo
          name: Color
          description: Defines the primary color or pattern, such as blue or striped
          friendly_id: color
          handle: color
          values:
          - color__black
        extended_attributes: []
        """,
        values_by_friendly_id,
    )

    assert error.model.errors.details == {"id": [{"error": "not_a_number", "value": "foo"}]}


def test_negative_id(values_by_friendly_id):
    error = _load_invalid(
        """
        base_attributes:
        - id: -3
          description: Defines the primary color
          friendly_id: color
          handle: color
          values: [color__black]
        extended_attributes: []
        """,
        values_by_friendly_id,
    )

    assert error.model.errors.details == {
        "id": [{"error": "greater_than_or_equal_to", "value": -3, "count": 0}]
    }


def test_error_reports_first_invalid_attribute_and_collects_all_failures():
    error = _load_invalid(
        """
        base_attributes:
        - id: 1
          friendly_id: color
          handle: color
          values: [missing]
        - id: 2
          friendly_id: size
          description: Size of the product
          handle: size
        extended_attributes:
        - id: 3
          friendly_id: shoe_size
          handle: shoe_size
          values_from: size
        """
    )

    assert error.model.friendly_id == "color"
    assert error.model.errors.details == {
        "description": [{"error": "blank"}],
        "values": [{"error": "not_found"}],
    }
    assert [m.friendly_id for m in error.failures] == ["color", "size"]
    assert "Validation failed for Attribute 'color'" in str(error)
    assert "1 more invalid record" in str(error)
