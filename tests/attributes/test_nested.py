# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the list, map, set and single nested attribute variants."""

from pathlib import Path

import pytest

from tfschemagen.attributes import (
    ListNestedAttribute,
    MapNestedAttribute,
    SetNestedAttribute,
    SingleNestedAttribute,
)
from tfschemagen.schema import Convertible, NestedMember, TemplateRegistry, UnimplementedFeatureError
from tfschemagen.schema.imports import ATTR_IMPORT, BASE_TYPES_IMPORT, TYPES_IMPORT
from tfschemagen.spec import (
    AssociatedExternalType,
    AttributeSpec,
    BoolAttribute,
    CodeImport,
    ComputedOptionalRequired,
    CustomCode,
    CustomType,
    NestedAttributeObject,
    SetNestedAttribute as SetNestedAttributeSpec,
    StringAttribute,
    Validator,
)
from tfschemagen.spec import schema as spec

# ###############
# Helpers
# ###############


def _bool_child(name: str = "bool_attribute") -> AttributeSpec:
    return AttributeSpec(
        name=name, bool_=BoolAttribute(computed_optional_required=ComputedOptionalRequired.OPTIONAL)
    )


def _nested_object(*children: AttributeSpec, **kwargs: object) -> NestedAttributeObject:
    return NestedAttributeObject(attributes=list(children), **kwargs)


@pytest.fixture(scope="module")
def templates() -> TemplateRegistry:
    return TemplateRegistry()


# ###############
# Schema
# ###############


def test_list_nested_schema(templates: TemplateRegistry) -> None:
    """The nested object carries the child attributes and the generated custom type."""
    attribute = ListNestedAttribute.from_spec(
        "list_nested_attribute",
        spec.ListNestedAttribute(
            nested_object=_nested_object(_bool_child()),
            computed_optional_required=ComputedOptionalRequired.OPTIONAL,
        ),
    )

    assert attribute.schema("list_nested_attribute", templates) == (
        '"list_nested_attribute": schema.ListNestedAttribute{\n'
        "NestedObject: schema.NestedAttributeObject{\n"
        "Attributes: map[string]schema.Attribute{\n"
        '"bool_attribute": schema.BoolAttribute{\n'
        "Optional: true,\n"
        "},\n"
        "},\n"
        "CustomType: ListNestedAttributeType{\n"
        "ObjectType: types.ObjectType{\n"
        "AttrTypes: ListNestedAttributeValue{}.AttributeTypes(ctx),\n"
        "},\n"
        "},\n"
        "},\n"
        "Optional: true,\n"
        "},"
    )
    assert attribute.model_field("list_nested_attribute").value_type == "types.List"


def test_collection_custom_type_overrides_model_type(templates: TemplateRegistry) -> None:
    attribute = ListNestedAttribute.from_spec(
        "rules",
        spec.ListNestedAttribute(
            custom_type=CustomType(import_=CodeImport(path="example.com/ct"), type="ct.ListType", value_type="ct.List"),
            nested_object=_nested_object(_bool_child()),
        ),
    )

    assert attribute.model_field("rules").value_type == "ct.List"
    assert "CustomType: ct.ListType,\n" in attribute.schema("rules", templates)
    assert attribute.imports().paths()[0] == "example.com/ct"


def test_children_are_sorted(templates: TemplateRegistry) -> None:
    attribute = MapNestedAttribute.from_spec(
        "rules",
        spec.MapNestedAttribute(nested_object=_nested_object(_bool_child("zeta"), _bool_child("alpha"))),
    )
    text = attribute.schema("rules", templates)

    assert text.index('"alpha"') < text.index('"zeta"')
    assert text.startswith('"rules": schema.MapNestedAttribute{\n')


def test_object_level_and_collection_level_validators(templates: TemplateRegistry) -> None:
    attribute = ListNestedAttribute.from_spec(
        "rules",
        spec.ListNestedAttribute(
            nested_object=_nested_object(
                _bool_child(), validators=[Validator(custom=CustomCode(schema_definition="objectValidator()"))]
            ),
            validators=[Validator(custom=CustomCode(schema_definition="listValidator()"))],
        ),
    )
    text = attribute.schema("rules", templates)

    assert "Validators: []validator.Object{\nobjectValidator(),\n},\n" in text
    assert "Validators: []validator.List{\nlistValidator(),\n},\n" in text
    assert text.index("validator.Object") < text.index("validator.List")


def test_single_nested_schema(templates: TemplateRegistry) -> None:
    attribute = SingleNestedAttribute.from_spec(
        "config",
        spec.SingleNestedAttribute(attributes=[_bool_child("flag")], computed_optional_required="required"),
    )

    assert attribute.schema("config", templates) == (
        '"config": schema.SingleNestedAttribute{\n'
        "Attributes: map[string]schema.Attribute{\n"
        '"flag": schema.BoolAttribute{\n'
        "Optional: true,\n"
        "},\n"
        "},\n"
        "CustomType: ConfigType{\n"
        "ObjectType: types.ObjectType{\n"
        "AttrTypes: ConfigValue{}.AttributeTypes(ctx),\n"
        "},\n"
        "},\n"
        "Required: true,\n"
        "},"
    )
    assert attribute.model_field("config").value_type == "ConfigValue"


def test_empty_nested_object_keeps_attribute_map(templates: TemplateRegistry) -> None:
    text = ListNestedAttribute.from_spec("rules", spec.ListNestedAttribute()).schema("rules", templates)

    assert text.startswith(
        '"rules": schema.ListNestedAttribute{\nNestedObject: schema.NestedAttributeObject{\n'
        "Attributes: map[string]schema.Attribute{\n},\nCustomType: RulesType{"
    )


def test_nested_object_template_can_be_overridden(tmp_path: Path) -> None:
    """The nested object and member map text come from the registry passed in."""
    (tmp_path / "nested_object.go.j2").write_text(
        "NestedObject: custom.{{ object_kind }}{\n{% include 'members.go.j2' %}},\n", encoding="utf-8"
    )
    (tmp_path / "members.go.j2").write_text("// members{{ attributes }}\n", encoding="utf-8")
    attribute = ListNestedAttribute.from_spec(
        "rules", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child("flag")))
    )

    text = attribute.schema("rules", TemplateRegistry(tmp_path))

    assert text.startswith('"rules": schema.ListNestedAttribute{\nNestedObject: custom.Attribute{\n// members\n"flag"')


# ###############
# Imports
# ###############


def test_nested_imports() -> None:
    attribute = ListNestedAttribute.from_spec(
        "rules",
        spec.ListNestedAttribute(
            nested_object=_nested_object(
                AttributeSpec(
                    name="name",
                    string=StringAttribute(
                        custom_type=CustomType(
                            import_=CodeImport(path="example.com/child"), type="child.T", value_type="child.V"
                        )
                    ),
                ),
                associated_external_type=AssociatedExternalType(
                    import_=CodeImport(path="example.com/apisdk"), type="*apisdk.Rule"
                ),
            ),
        ),
    )

    assert attribute.imports().paths() == [
        TYPES_IMPORT,
        "example.com/child",
        ATTR_IMPORT,
        "example.com/apisdk",
        BASE_TYPES_IMPORT,
    ]


def test_imports_are_idempotent() -> None:
    attribute = ListNestedAttribute.from_spec(
        "rules", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child(), _bool_child("other")))
    )

    assert attribute.imports() == attribute.imports()
    assert attribute.imports().paths() == [TYPES_IMPORT, ATTR_IMPORT]


# ###############
# Capabilities
# ###############


def test_nested_capabilities() -> None:
    list_nested = ListNestedAttribute.from_spec(
        "rules", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child()))
    )

    assert isinstance(list_nested, NestedMember)
    assert list(list_nested.get_attributes()) == ["bool_attribute"]
    assert len(list_nested.get_blocks()) == 0
    assert not isinstance(list_nested, Convertible)
    assert list_nested.attr_type("rules") == "basetypes.ListType{\nElemType: RulesValue{}.Type(ctx),\n}"
    assert list_nested.attr_value("rules") == "basetypes.ListValue"


def test_set_nested_conversion_is_unimplemented() -> None:
    attribute = SetNestedAttribute.from_spec(
        "rules", SetNestedAttributeSpec(nested_object=_nested_object(_bool_child()))
    )

    with pytest.raises(UnimplementedFeatureError):
        attribute.to()
    with pytest.raises(UnimplementedFeatureError):
        attribute.from_()


def test_single_nested_conversion_is_unimplemented() -> None:
    attribute = SingleNestedAttribute.from_spec("config", spec.SingleNestedAttribute())

    with pytest.raises(UnimplementedFeatureError):
        attribute.to()


def test_equality() -> None:
    first = ListNestedAttribute.from_spec("r", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child())))
    second = ListNestedAttribute.from_spec("r", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child())))
    other = ListNestedAttribute.from_spec("r", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child("x"))))

    assert first.equal(second)
    assert not first.equal(other)
    assert not first.equal(
        SetNestedAttribute.from_spec("r", SetNestedAttributeSpec(nested_object=_nested_object(_bool_child())))
    )


# ###############
# Custom Types and Conversion Functions
# ###############


def test_custom_type_and_value_recurses(templates: TemplateRegistry) -> None:
    inner = AttributeSpec(
        name="inner",
        single_nested=spec.SingleNestedAttribute(attributes=[_bool_child("flag")]),
    )
    attribute = ListNestedAttribute.from_spec(
        "rules", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child(), inner))
    )
    text = attribute.custom_type_and_value("rules", templates)

    assert "type RulesValue struct {" in text
    assert 'BoolAttribute basetypes.BoolValue `tfsdk:"bool_attribute"`' in text
    assert 'Inner InnerValue `tfsdk:"inner"`' in text
    assert "type InnerValue struct {" in text
    assert text.index("type RulesValue struct {") < text.index("type InnerValue struct {")


def test_to_from_functions_need_external_type(templates: TemplateRegistry) -> None:
    plain = ListNestedAttribute.from_spec(
        "rules", spec.ListNestedAttribute(nested_object=_nested_object(_bool_child()))
    )
    external = ListNestedAttribute.from_spec(
        "rules",
        spec.ListNestedAttribute(
            nested_object=_nested_object(
                _bool_child("enabled"), associated_external_type=AssociatedExternalType(type="*apisdk.Rule")
            )
        ),
    )

    assert plain.to_from_functions("rules", templates) == ""
    text = external.to_from_functions("rules", templates)
    assert "func (v RulesValue) ToApisdkRule(ctx context.Context) (*apisdk.Rule, diag.Diagnostics) {" in text
    assert "Enabled: v.Enabled.ValueBoolPointer()," in text
    assert "Enabled: types.BoolPointerValue(apiObject.Enabled)," in text


def test_unimplemented_child_conversion_names_its_path(templates: TemplateRegistry) -> None:
    child = AttributeSpec(name="children", set_nested=SetNestedAttributeSpec())
    attribute = ListNestedAttribute.from_spec(
        "rules",
        spec.ListNestedAttribute(
            nested_object=_nested_object(child, associated_external_type=AssociatedExternalType(type="*apisdk.Rule"))
        ),
    )

    with pytest.raises(UnimplementedFeatureError) as exc_info:
        attribute.to_from_functions("rules", templates)

    assert exc_info.value.path == ["children"]
