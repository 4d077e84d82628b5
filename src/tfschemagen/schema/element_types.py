# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of recursive element types into Go expressions.

An element type is projected independently into:

* a framework type expression (``types.ListType{ElemType: types.StringType}``),
* a native Go storage type (``[]*string``),
* a framework value type (``types.List``) and value-from function,
* the imports its expression needs.
"""

from __future__ import annotations

from tfschemagen.identifiers import go_quote
from tfschemagen.schema.conversion import ObjectField
from tfschemagen.schema.errors import UnconvertibleTypeError, UnknownKindError, UnsupportedConversionError
from tfschemagen.schema.imports import ATTR_IMPORT, TYPES_IMPORT, Imports, imports_of
from tfschemagen.spec.types import (
    CollectionElement,
    CustomType,
    ElementType,
    ObjectAttributeType,
    ObjectElement,
    PrimitiveElement,
)

# ###############
# Public Interface
# ###############

SCALAR_GO_TYPES = {
    "Bool": "*bool",
    "Float64": "*float64",
    "Int64": "*int64",
    "Number": "*big.Float",
    "String": "*string",
}

SCALAR_TO_FUNCS = {
    "Bool": "ValueBoolPointer",
    "Float64": "ValueFloat64Pointer",
    "Int64": "ValueInt64Pointer",
    "Number": "ValueBigFloat",
    "String": "ValueStringPointer",
}

SCALAR_FROM_FUNCS = {
    "Bool": "BoolPointerValue",
    "Float64": "Float64PointerValue",
    "Int64": "Int64PointerValue",
    "Number": "NumberValue",
    "String": "StringPointerValue",
}

ElementPayload = PrimitiveElement | CollectionElement | ObjectElement


def element_kind(element_type: ElementType) -> tuple[str, ElementPayload]:
    """Return the kind name (``"Bool"``, ``"List"``, ...) and payload of an element type.

    Raises:
        UnknownKindError: If no kind field is populated.
    """
    for attr_name, kind in _KIND_FIELDS:
        payload = getattr(element_type, attr_name)
        if payload is not None:
            return kind, payload
    raise UnknownKindError("element", element_type)


def element_type_string(element_type: ElementType) -> str:
    """Return the framework type expression for an element type.

    A custom type override is emitted verbatim and wins over the structural form.
    """
    kind, payload = element_kind(element_type)
    if payload.custom_type is not None:
        return payload.custom_type.type
    if isinstance(payload, CollectionElement):
        return f"types.{kind}Type{{\nElemType: {element_type_string(payload.element_type)},\n}}"
    if isinstance(payload, ObjectElement):
        attr_types = attr_types_string(payload.attribute_types)
        return f"types.ObjectType{{\nAttrTypes: map[string]attr.Type{{\n{attr_types}\n}},\n}}"
    return f"types.{kind}Type"


def attr_types_string(attribute_types: list[ObjectAttributeType]) -> str:
    """Return ``"name": <type>,`` entries for object fields, one per line, in declared order."""
    return "\n".join(f"{go_quote(a.name)}: {element_type_string(a)}," for a in attribute_types)


def element_type_go_type(element_type: ElementType) -> str:
    """Return the native Go type used to store values of this element type.

    Raises:
        UnconvertibleTypeError: If the element type is, or contains, an object.
    """
    kind, payload = element_kind(element_type)
    if kind == "Object":
        raise UnconvertibleTypeError("object element types have no native Go storage type")
    if isinstance(payload, CollectionElement):
        inner = element_type_go_type(payload.element_type)
        if kind == "Map":
            return f"map[string]{inner}"
        return f"[]{inner}"
    return SCALAR_GO_TYPES[kind]


def element_type_value_type(element_type: ElementType) -> str:
    """Return the framework value type, or the custom value type if overridden."""
    kind, payload = element_kind(element_type)
    if payload.custom_type is not None:
        return payload.custom_type.value_type
    return f"types.{kind}"


def element_type_from_func(element_type: ElementType) -> str:
    """Return the ``types`` function that builds a value from a native pointer.

    Raises:
        UnsupportedConversionError: For collection and object element types.
    """
    kind, _ = element_kind(element_type)
    if kind not in SCALAR_FROM_FUNCS:
        raise UnsupportedConversionError(f"no value-from function for {kind.lower()} element type")
    return f"types.{SCALAR_FROM_FUNCS[kind]}"


def element_type_imports(element_type: ElementType) -> Imports:
    """Return the imports the element type expression needs.

    Custom overrides contribute their own import and stop the recursion. Every
    structural node needs the ``types`` package and every non-empty object node
    needs ``attr``.
    """
    imports = Imports()
    _, payload = element_kind(element_type)
    if payload.custom_type is not None:
        imports.append(_custom_type_import(payload.custom_type))
        return imports
    imports.append(imports_of(TYPES_IMPORT))
    if isinstance(payload, CollectionElement):
        imports.append(element_type_imports(payload.element_type))
    elif isinstance(payload, ObjectElement):
        imports.append(attr_types_imports(payload.attribute_types))
    return imports


def attr_types_imports(attribute_types: list[ObjectAttributeType]) -> Imports:
    """Imports for object fields; empty when there are no fields."""
    imports = Imports()
    if not attribute_types:
        return imports
    imports.append(imports_of(ATTR_IMPORT))
    for attribute_type in attribute_types:
        imports.append(element_type_imports(attribute_type))
    return imports


def object_field_to(element_type: ElementType) -> ObjectField:
    """Conversion of one object field towards a native Go value.

    Raises:
        UnsupportedConversionError: For collection and object fields.
    """
    kind, _ = element_kind(element_type)
    if kind not in SCALAR_TO_FUNCS:
        raise UnsupportedConversionError(f"{kind.lower()} object fields cannot be converted to a native type")
    return ObjectField(go_type=SCALAR_GO_TYPES[kind], type=f"types.{kind}", to_func=SCALAR_TO_FUNCS[kind])


def object_field_from(element_type: ElementType) -> ObjectField:
    """Conversion of one object field from a native Go value.

    Raises:
        UnsupportedConversionError: For collection and object fields.
    """
    kind, _ = element_kind(element_type)
    if kind not in SCALAR_FROM_FUNCS:
        raise UnsupportedConversionError(f"{kind.lower()} object fields cannot be converted from a native type")
    return ObjectField(type=f"types.{kind}Type", from_func=SCALAR_FROM_FUNCS[kind])


def contains_number(attribute_types: list[ObjectAttributeType]) -> bool:
    """Return True if any top-level object field is a number."""
    return any(a.number is not None for a in attribute_types)


# ################
# Implementation
# ################

_KIND_FIELDS = (
    ("bool_", "Bool"),
    ("float64", "Float64"),
    ("int64", "Int64"),
    ("list_", "List"),
    ("map_", "Map"),
    ("number", "Number"),
    ("object_", "Object"),
    ("set_", "Set"),
    ("string", "String"),
)


def _custom_type_import(custom_type: CustomType) -> Imports:
    if custom_type.import_ is None:
        return Imports()
    return Imports([custom_type.import_])
