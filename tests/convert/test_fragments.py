# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schema text fragments shared by attribute and block variants."""

from tfschemagen.convert import (
    ComputedOptionalRequired,
    CustomTypeCollection,
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
    CustomTypeObject,
    CustomTypePrimitive,
    DefaultBool,
    DefaultCustom,
    DefaultFloat64,
    DefaultInt64,
    DefaultString,
    DeprecationMessage,
    Description,
    ElementTypeFragment,
    ObjectAttributeTypes,
    PlanModifiers,
    Sensitive,
    Validators,
)
from tfschemagen.schema import AssocExtType
from tfschemagen.schema.imports import (
    ATTR_IMPORT,
    BOOL_DEFAULT_IMPORT,
    PLAN_MODIFIER_IMPORT,
    STRING_DEFAULT_IMPORT,
    TYPES_IMPORT,
    VALIDATOR_IMPORT,
)
from tfschemagen.spec import (
    BoolDefault,
    CodeImport,
    CustomCode,
    CustomDefault,
    CustomType,
    ElementType,
    Float64Default,
    Int64Default,
    ObjectAttributeType,
    PlanModifier,
    PrimitiveElement,
    StringDefault,
    Validator,
)
from tfschemagen.spec import ComputedOptionalRequired as Presence

# ###############
# Helpers
# ###############

_CUSTOM_TYPE = CustomType(import_=CodeImport(path="example.com/ct"), type="ct.Type", value_type="ct.Value")
_ASSOC = AssocExtType(type="*apisdk.Type")


def _custom(definition: str, *paths: str) -> CustomCode:
    return CustomCode(imports=[CodeImport(path=p) for p in paths], schema_definition=definition)


# ###############
# Flags and Documentation
# ###############


def test_computed_optional_required() -> None:
    assert ComputedOptionalRequired(Presence.REQUIRED).schema() == "Required: true,\n"
    assert ComputedOptionalRequired(Presence.OPTIONAL).schema() == "Optional: true,\n"
    assert ComputedOptionalRequired(Presence.COMPUTED).schema() == "Computed: true,\n"
    assert ComputedOptionalRequired(Presence.COMPUTED_OPTIONAL).schema() == "Optional: true,\nComputed: true,\n"
    assert ComputedOptionalRequired(None).schema() == ""


def test_sensitive_description_deprecation() -> None:
    assert Sensitive(True).schema() == "Sensitive: true,\n"
    assert Sensitive(False).schema() == ""
    assert Description('a "b"').schema() == 'Description: "a \\"b\\"",\nMarkdownDescription: "a \\"b\\"",\n'
    assert Description(None).schema() == ""
    assert DeprecationMessage("use other").schema() == 'DeprecationMessage: "use other",\n'
    assert DeprecationMessage("").schema() == ""


# ###############
# Custom Types
# ###############


def test_custom_type_primitive_precedence() -> None:
    """An explicit override beats a generated type for an external type."""
    both = CustomTypePrimitive(_CUSTOM_TYPE, _ASSOC, "enabled")
    assoc_only = CustomTypePrimitive(None, _ASSOC, "enabled")
    neither = CustomTypePrimitive(None, None, "enabled")

    assert both.schema() == "CustomType: ct.Type,\n"
    assert both.value_type() == "ct.Value"
    assert assoc_only.schema() == "CustomType: EnabledType{},\n"
    assert assoc_only.value_type() == "EnabledValue"
    assert neither.schema() == ""
    assert neither.value_type() == ""
    assert neither.imports().paths() == [TYPES_IMPORT]


def test_custom_type_collection_wraps_element_type() -> None:
    fragment = CustomTypeCollection(None, _ASSOC, "List", ElementType(string=PrimitiveElement()), "tags")

    assert fragment.schema() == "CustomType: TagsType{\ntypes.ListType{\nElemType: types.StringType,\n},\n},\n"


def test_custom_type_object() -> None:
    fragment = CustomTypeObject(None, _ASSOC, "settings")

    assert fragment.schema() == (
        "CustomType: SettingsType{\ntypes.ObjectType{\nAttrTypes: SettingsValue{}.AttributeTypes(ctx),\n},\n},\n"
    )
    assert CustomTypeObject(None, None, "settings").schema() == ""


def test_custom_type_nested_object_is_always_generated() -> None:
    fragment = CustomTypeNestedObject(None, "rule")

    assert fragment.schema() == (
        "CustomType: RuleType{\nObjectType: types.ObjectType{\nAttrTypes: RuleValue{}.AttributeTypes(ctx),\n},\n},\n"
    )
    assert fragment.value_type() == "RuleValue"
    assert CustomTypeNestedObject(_CUSTOM_TYPE, "rule").schema() == "CustomType: ct.Type,\n"


def test_custom_type_nested_collection_only_when_overridden() -> None:
    assert CustomTypeNestedCollection(None).schema() == ""
    assert CustomTypeNestedCollection(None).imports().paths() == []
    assert CustomTypeNestedCollection(_CUSTOM_TYPE).imports().paths() == ["example.com/ct"]


# ###############
# Defaults
# ###############


def test_static_defaults() -> None:
    assert DefaultBool(BoolDefault(static=False)).schema() == "Default: booldefault.StaticBool(false),\n"
    assert DefaultFloat64(Float64Default(static=1.5)).schema() == "Default: float64default.StaticFloat64(1.5),\n"
    assert DefaultInt64(Int64Default(static=42)).schema() == "Default: int64default.StaticInt64(42),\n"
    assert DefaultString(StringDefault(static="x")).schema() == 'Default: stringdefault.StaticString("x"),\n'
    assert DefaultBool(BoolDefault(static=True)).imports().paths() == [BOOL_DEFAULT_IMPORT]
    assert DefaultString(StringDefault(static="")).imports().paths() == [STRING_DEFAULT_IMPORT]


def test_static_default_wins_over_custom() -> None:
    default = BoolDefault(static=True, custom=_custom("mydefault.Bool()", "example.com/mydefault"))

    assert DefaultBool(default).schema() == "Default: booldefault.StaticBool(true),\n"
    assert DefaultBool(default).imports().paths() == [BOOL_DEFAULT_IMPORT]


def test_custom_defaults() -> None:
    custom = _custom("mydefault.Number()", "example.com/mydefault")

    assert DefaultCustom(CustomDefault(custom=custom)).schema() == "Default: mydefault.Number(),\n"
    assert DefaultCustom(CustomDefault(custom=custom)).imports().paths() == ["example.com/mydefault"]
    assert DefaultInt64(Int64Default(custom=custom)).schema() == "Default: mydefault.Number(),\n"
    assert DefaultCustom(None).schema() == ""
    assert DefaultCustom(CustomDefault()).schema() == ""


# ###############
# Plan Modifiers and Validators
# ###############


def test_plan_modifiers_and_validators() -> None:
    plan_modifiers = PlanModifiers.from_spec("String", [PlanModifier(custom=_custom("pm.Keep()", "example.com/pm"))])
    validators = Validators.from_spec("List", [Validator(custom=_custom("v.Len(1)", "example.com/v")), Validator()])

    assert plan_modifiers.schema() == "PlanModifiers: []planmodifier.String{\npm.Keep(),\n},\n"
    assert plan_modifiers.imports().paths() == [PLAN_MODIFIER_IMPORT, "example.com/pm"]
    assert validators.schema() == "Validators: []validator.List{\nv.Len(1),\n},\n"
    assert validators.imports().paths() == [VALIDATOR_IMPORT, "example.com/v"]


def test_empty_hooks_emit_nothing() -> None:
    assert Validators.from_spec("Bool", []).schema() == ""
    assert Validators.from_spec("Bool", []).imports().paths() == []


def test_hook_equality_ignores_declared_order() -> None:
    first, second = _custom("a.A()"), _custom("b.B()")

    assert Validators("Bool", [first, second]) == Validators("Bool", [second, first])
    assert Validators("Bool", [first]) != Validators("String", [first])


# ###############
# Element and Attribute Types
# ###############


def test_element_type_fragment() -> None:
    fragment = ElementTypeFragment(ElementType(string=PrimitiveElement()))

    assert fragment.schema() == "ElementType: types.StringType,\n"
    assert fragment.imports().paths() == [TYPES_IMPORT]


def test_object_attribute_types() -> None:
    fragment = ObjectAttributeTypes([ObjectAttributeType(name="name", string=PrimitiveElement())])

    assert fragment.schema() == 'AttributeTypes: map[string]attr.Type{\n"name": types.StringType,\n},\n'
    assert fragment.imports().paths() == [ATTR_IMPORT, TYPES_IMPORT]
    assert ObjectAttributeTypes([]).schema() == ""
    assert ObjectAttributeTypes([]).imports().paths() == []
