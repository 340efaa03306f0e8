"""Tests for the optic variants."""

from collections import OrderedDict, namedtuple
from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from opticks import (
    Getter,
    Lens,
    Setter,
    Traversal,
    UnavailableOpticOperationError,
    alter,
    attr,
    fields_of,
    filtered,
    getter,
    identity,
    index,
    lens,
    optic,
    over,
    set_,
    setter,
    to_list,
    traversal,
    values,
    view,
)
from samples import Account, Address, Person, Plain


class TestGetter:
    """Tests for read-only optics."""

    def test_reads_projection(self):
        first = getter(lambda xs: xs[0])
        assert view(first, [4, 5]) == 4
        assert first.as_getter([4, 5]) == 4

    def test_capabilities(self):
        g = getter(len)
        assert isinstance(g, Getter)
        assert g.capabilities == frozenset({"read"})
        assert g.readable and not g.writable

    def test_as_setter_is_unavailable(self):
        g = getter(len)
        with pytest.raises(UnavailableOpticOperationError) as exc_info:
            g.as_setter

        assert exc_info.value.optic is g
        assert exc_info.value.operation == "as_setter"

    def test_is_immutable(self):
        g = getter(len)
        with pytest.raises(FrozenInstanceError):
            g.label = "changed"  # type: ignore[misc]


class TestSetter:
    """Tests for write-only optics."""

    def test_set_replaces_focus(self):
        second = setter(lambda f, pair: (pair[0], f(pair[1])))

        assert isinstance(second, Setter)
        assert second.set(9, (1, 2)) == (1, 9)
        assert second.as_setter(lambda x: x * 10, (1, 2)) == (1, 20)

    def test_as_getter_is_unavailable(self):
        s = setter(lambda f, x: f(x))
        assert s.capabilities == frozenset({"write"})
        with pytest.raises(UnavailableOpticOperationError) as exc_info:
            s.as_getter

        assert exc_info.value.capability == "read"


class TestLens:
    """Tests for lens constructors."""

    def test_lens_from_get_and_set(self):
        first = lens(lambda pair: pair[0], lambda pair, v: (v, pair[1]))

        assert isinstance(first, Lens)
        assert view(first, (1, 2)) == 1
        assert set_(first, 5, (1, 2)) == (5, 2)
        assert over(first, lambda x: x + 1, (1, 2)) == (2, 2)

    def test_alter_reads_missing_as_none(self):
        assert view(alter("k"), {}) is None
        assert view(alter("k"), None) is None
        assert view(alter("k"), 42) is None

    def test_alter_creates_record(self):
        assert set_(alter("k"), 1, None) == {"k": 1}
        assert set_(alter("k"), 1, {}) == set_(alter("k"), 1, None)

    def test_alter_identity_update_creates_absent_key(self):
        assert over(alter("k"), identity, {}) == {"k": None}
        assert over(optic("items", values), identity, {}) == {"items": None}

    def test_alter_does_not_mutate(self):
        subject = {"k": 1, "other": 2}
        result = set_(alter("k"), 3, subject)

        assert subject == {"k": 1, "other": 2}
        assert result == {"k": 3, "other": 2}
        assert result is not subject

    def test_alter_keeps_mapping_type(self):
        subject = OrderedDict([("a", 1), ("b", 2)])
        result = set_(alter("a"), 5, subject)

        assert isinstance(result, OrderedDict)
        assert list(result.items()) == [("a", 5), ("b", 2)]

    def test_alter_on_read_only_mapping(self):
        subject = MappingProxyType({"a": 1})

        assert set_(alter("a"), 2, subject) == {"a": 2}
        assert subject["a"] == 1

    def test_alter_default_factory(self):
        result = set_(alter("k", default_factory=OrderedDict), 1, None)
        assert isinstance(result, OrderedDict)

    def test_alter_with_integer_key_on_list(self):
        assert view(alter(1), ["a", "b"]) == "b"
        assert set_(alter(1), "z", ["a", "b"]) == ["a", "z"]

    def test_index(self):
        assert view(index(0), (1, 2)) == 1
        assert view(index(-1), [1, 2]) == 2
        assert view(index(5), [1, 2]) is None
        assert set_(index(0), 9, (1, 2)) == (9, 2)
        assert set_(index(-1), 9, [1, 2]) == [1, 9]

    def test_index_pads_on_write(self):
        assert set_(index(2), "c", ["a"]) == ["a", None, "c"]
        assert set_(index(0), "a", None) == ["a"]

    def test_index_on_namedtuple(self):
        Point = namedtuple("Point", ["x", "y"])
        result = set_(index(1), 7, Point(1, 2))

        assert result == Point(1, 7)
        assert isinstance(result, Point)

    def test_attr_on_dataclass(self):
        person = Person(name="Ada", address=Address(city="London"))
        city = optic(attr("address"), attr("city"))
        moved = set_(city, "Paris", person)

        assert view(city, person) == "London"
        assert moved == Person(name="Ada", address=Address(city="Paris"))
        assert person.address.city == "London"

    def test_attr_on_pydantic_model(self):
        account = Account(owner="ada", balance=10)
        result = over(attr("balance"), lambda b: b + 5, account)

        assert isinstance(result, Account)
        assert result.balance == 15
        assert account.balance == 10

    def test_attr_on_plain_object(self):
        obj = Plain(1)
        result = set_(attr("value"), 2, obj)

        assert result.value == 2
        assert obj.value == 1

    def test_attr_missing(self):
        assert view(attr("nope"), Plain(1)) is None
        assert set_(attr("value"), 1, None) is None

    def test_fields_of_dataclass(self):
        lenses = fields_of(Person)

        assert set(lenses) == {"name", "address", "tags"}
        person = Person(name="Ada", address=Address(city="London"))
        assert view(lenses["name"], person) == "Ada"

    def test_fields_of_pydantic_model(self):
        lenses = fields_of(Account)

        assert set(lenses) == {"owner", "balance"}
        assert set_(lenses["owner"], "bob", Account(owner="ada")).owner == "bob"

    def test_fields_of_rejects_other_types(self):
        with pytest.raises(TypeError):
            fields_of(Plain)


class TestTraversal:
    """Tests for multi-focus optics."""

    def test_values_reads_in_order(self):
        assert isinstance(values, Traversal)
        assert view(values, [3, 1, 2]) == [3, 1, 2]
        assert view(values, {"b": 1, "a": 2}) == [1, 2]

    def test_values_of_absent_container(self):
        assert view(values, None) == []
        assert view(values, []) == []
        assert over(values, lambda x: x + 1, None) is None

    def test_values_updates_each_focus(self):
        assert over(values, lambda x: x * 2, [1, 2, 3]) == [2, 4, 6]
        assert over(values, lambda x: x * 2, (1, 2)) == (2, 4)
        assert over(values, str.upper, {"a": "x", "b": "y"}) == {"a": "X", "b": "Y"}

    def test_set_replaces_every_focus(self):
        assert set_(values, 0, [1, 2, 3]) == [0, 0, 0]

    def test_identity_update_is_observably_noop(self):
        subject = [{"a": 1}, {"a": 2}]
        result = over(values, lambda x: x, subject)

        assert result == subject
        assert result is not subject

    def test_does_not_mutate(self):
        subject = [1, 2, 3]
        over(values, lambda x: -x, subject)
        assert subject == [1, 2, 3]

    def test_traversal_through_lenses(self):
        subject = {"users": [{"name": "ada"}, {"name": "bob"}]}
        names = optic("users", values, "name")

        assert view(names, subject) == ["ada", "bob"]
        assert over(names, str.title, subject) == {"users": [{"name": "Ada"}, {"name": "Bob"}]}
        assert subject["users"][0]["name"] == "ada"

    def test_filtered(self):
        evens = filtered(lambda x: x % 2 == 0)

        assert to_list(evens, [1, 2, 3, 4]) == [2, 4]
        assert over(evens, lambda x: x * 10, [1, 2, 3, 4]) == [1, 20, 3, 40]
        assert over(evens, lambda x: x * 10, {"a": 1, "b": 2}) == {"a": 1, "b": 20}
        assert over(evens, lambda x: x * 10, None) is None

    def test_custom_traversal(self):
        both = traversal(lambda pair: pair, lambda pair, foci: tuple(foci), label="both")

        assert view(both, (1, 2)) == [1, 2]
        assert over(both, lambda x: x + 1, (1, 2)) == (2, 3)
        assert repr(both) == "both"


def test_labels_describe_chains() -> None:
    chain = optic("users", values, "name")

    assert repr(chain) == "optic(alter('users'), values, alter('name'))"
    assert chain.steps[1] is values
    assert chain.multi
