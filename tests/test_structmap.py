from dataclasses import dataclass, field

import pytest

from workbench.structmap import describe_fields, map_to_struct, struct_to_map


@dataclass
class Member:
    id: int
    name: str
    flg: bool


@dataclass
class Hidden:
    label: str
    _internal: int = field(default=0)


class Plain:
    def __init__(self):
        self.i = 5
        self.text = "Bunnies"


def test_struct_to_map():
    assert struct_to_map(Member(1, "Bunnies", True)) == {"id": 1, "name": "Bunnies", "flg": True}


def test_round_trip():
    original = Member(1, "Bunnies", True)
    target = map_to_struct(struct_to_map(original), Member(0, "", False))
    assert target == original


def test_private_fields_excluded():
    assert struct_to_map(Hidden("shown", 9)) == {"label": "shown"}


def test_plain_object():
    assert struct_to_map(Plain()) == {"i": 5, "text": "Bunnies"}


def test_unknown_field_raises():
    with pytest.raises(AttributeError):
        map_to_struct({"missing": 1}, Member(0, "", False))


def test_private_field_cannot_be_set():
    with pytest.raises(AttributeError):
        map_to_struct({"_internal": 3}, Hidden("x"))


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        map_to_struct({"id": "one"}, Member(0, "", False))


def test_bool_not_accepted_for_int():
    with pytest.raises(TypeError):
        map_to_struct({"id": True}, Member(0, "", False))


def test_describe_fields():
    assert describe_fields(Member(1, "Bunnies", True)) == [
        "val name: Member",
        "Num of Field: 3",
        "name-value: id - 1",
        "name-value: name - Bunnies",
        "name-value: flg - true",
    ]


def test_describe_fields_private_raises():
    with pytest.raises(AttributeError):
        describe_fields(Hidden("x"))


def test_struct_to_map_rejects_fieldless():
    with pytest.raises(TypeError):
        struct_to_map(42)