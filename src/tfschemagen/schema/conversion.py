# Copyright 2026 tfschemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptors of how a member converts to and from an external type."""

from __future__ import annotations

from dataclasses import dataclass, field

from tfschemagen.schema.assoc_ext_type import AssocExtType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CollectionFields:
    """Conversion details for list, map and set members.

    ``go_type`` is used when converting to the external type, ``element_type``
    and ``type_value_from`` when converting from it.
    """

    element_type: str = ""
    go_type: str = ""
    type_value_from: str = ""


@dataclass(frozen=True)
class ObjectField:
    """Conversion details for one field of an object member."""

    go_type: str = ""
    type: str = ""
    to_func: str = ""
    from_func: str = ""


@dataclass(frozen=True)
class ToFromConversion:
    """How a single member converts in one direction.

    Exactly one of the fields is expected to be set:

    * ``assoc_ext_type``: delegate to the member's own generated functions.
    * ``collection_type``: convert element-wise with ``ElementsAs``/``ValueFrom``.
    * ``object_type``: convert field by field.
    * ``default``: call a built-in framework conversion function.
    """

    assoc_ext_type: AssocExtType | None = None
    collection_type: CollectionFields | None = None
    object_type: dict[str, ObjectField] = field(default_factory=dict)
    default: str = ""
