"""Tests for field enumeration."""

# pylint: disable=redefined-outer-name,unused-variable,expression-not-assigned,singleton-comparison

from dataclasses import dataclass
from typing import Annotated

import pytest
from family import Audited, BaseParent, Child, Grandchild, Identifier, ObjectWithStatics, Parent

from dotreflect.reflection.errors import ClassNotFoundError
from dotreflect.reflection.fields import (
    all_fields,
    all_of,
    declared_fields,
    fields_of_type,
    fields_with_marker,
    is_instance_field,
    non_static_fields,
    of_type,
    with_marker,
)
from dotreflect.reflection.markers import MARKERS_KEY, has_marker, marked_field


class Column:
    """Marker carrying a column name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Column) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass
class Row:
    id: int = marked_field(Identifier, default=0)
    title: Annotated[str, Column("title")] = ""
    tags: list[str] = marked_field(Audited, Column("tags"), default_factory=list)
    note: str = ""


@dataclass
class AuditedRow(Row):
    editor: Annotated[str, Audited()] = ""


def describe_all_fields():
    def counts_own_and_ancestor_fields(expect):
        expect(len(all_fields(Parent))) == 7
        expect(len(all_fields(Child))) == 3
        expect(len(all_fields(Grandchild))) == 2

    def lists_most_derived_first(expect):
        names = [f.name for f in all_fields(Parent)]
        expect(names[-1]) == "base_attribute"
        expect(names[:2]) == ["PROTECTED_METHOD_VALUE", "PRIVATE_METHOD_VALUE"]

    def can_leave_out_ancestors(expect):
        fields = all_fields(Parent, include_ancestors=False)
        expect(len(fields)) == 6
        expect(all(f.owner is Parent for f in fields)) == True

    def includes_statics(expect):
        expect(len(all_fields(ObjectWithStatics))) == 3

    def never_lists_synthetic_members(expect):
        expect(any(f.name.startswith("__") for f in all_fields(Parent))) == False

    def accepts_class_names(expect):
        expect(len(all_fields("family.Parent"))) == 7


def describe_declared_fields():
    def filters_with_predicate(expect):
        fields = declared_fields(Parent, predicate=lambda f: f.name.endswith("_string"))
        expect([f.name for f in fields]) == ["parent_string"]

    def predicate_respects_include_ancestors(expect):
        fields = declared_fields(Parent, include_ancestors=False, predicate=lambda f: f.type is str)
        expect(BaseParent in {f.owner for f in fields}) == False
        expect(len(fields)) == 3


def describe_fields_of_type():
    def matches_declared_type_exactly(expect):
        expect([f.name for f in fields_of_type(Parent, Child)]) == ["child"]

    def counts_static_and_instance_fields(expect):
        # two class-level strings, parent_string and the inherited base_attribute
        expect(len(fields_of_type(Parent, str))) == 4

    def does_not_match_subtypes(expect):
        expect(fields_of_type(Parent, object)) == []

    def accepts_names(expect):
        expect(len(fields_of_type("family.Parent", "str"))) == 4

    def raises_for_unknown_type_name():
        with pytest.raises(ClassNotFoundError):
            fields_of_type(Parent, "family.Nothing")

    def matches_fields_next_to_an_unresolved_forward_reference(expect):
        class Leaf:
            pass

        class Node:
            leaf: "Leaf | None" = None
            name: "str" = ""

        expect([f.name for f in fields_of_type(Node, str)]) == ["name"]


def describe_fields_with_marker():
    def returns_exactly_the_tagged_fields(expect):
        fields = fields_with_marker(Parent, Identifier)
        expect([f.name for f in fields]) == ["id"]

    def returns_nothing_for_unused_marker(expect):
        expect(fields_with_marker(Parent, Audited)) == []

    def reads_dataclass_field_metadata(expect):
        expect([f.name for f in fields_with_marker(Row, Identifier)]) == ["id"]

    def matches_marker_instances_by_class(expect):
        expect([f.name for f in fields_with_marker(Row, Column)]) == ["title", "tags"]

    def matches_marker_instances_by_equality(expect):
        expect([f.name for f in fields_with_marker(Row, Column("tags"))]) == ["tags"]

    def walks_ancestors(expect):
        expect([f.name for f in fields_with_marker(AuditedRow, Audited)]) == ["editor", "tags"]


def describe_non_static_fields():
    def leaves_out_class_level_fields(expect):
        expect([f.name for f in non_static_fields(ObjectWithStatics)]) == ["name", "size"]

    def walks_ancestors(expect):
        names = [f.name for f in non_static_fields(Parent)]
        expect(len(names)) == 5
        expect("base_attribute" in names) == True
        expect("PROTECTED_METHOD_VALUE" in names) == False


def describe_predicates():
    def compose_like_the_field_queries(expect):
        both = all_of(of_type(str), is_instance_field)
        names = [f.name for f in declared_fields(Parent, predicate=both)]
        expect(names) == ["parent_string", "base_attribute"]
        expect(declared_fields(Parent, predicate=of_type("str"))) == fields_of_type(Parent, str)
        expect(declared_fields(Parent, predicate=with_marker(Identifier))) == fields_with_marker(
            Parent, Identifier
        )

    def all_of_without_predicates_matches_everything(expect):
        expect(declared_fields(Parent, predicate=all_of())) == all_fields(Parent)


def describe_markers():
    def marked_field_stores_markers_in_metadata(expect):
        tags = Row.__dataclass_fields__["tags"]
        expect(tags.metadata[MARKERS_KEY]) == (Audited, Column("tags"))
        expect(Row().tags) == []

    def has_marker_checks_presence_only(expect):
        member = all_fields(Row)[0]
        expect(has_marker(member, Identifier)) == True
        expect(has_marker(member, Audited)) == False
