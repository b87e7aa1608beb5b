import dataclasses

import pytest

from stdtour.records import Customer, Name


def test_customer_unpacks_into_fields():
    first, last, value = Customer("Tim", "Starr", 42)
    assert (first, last, value) == ("Tim", "Starr", 42)


def test_unpacked_copies_do_not_change_customer():
    customer = Customer("Tim", "Starr", 42)
    first, last, value = customer
    last = "Waters"
    value += 10
    assert customer.last == "Starr"
    assert customer.value == 42
    assert (last, value) != (customer.last, customer.value)


def test_customer_is_immutable():
    customer = Customer("Tim", "Starr", 42)
    with pytest.raises(dataclasses.FrozenInstanceError):
        customer.value = 1
    assert customer.value == 42
    assert tuple(customer) == ("Tim", "Starr", 42)


def test_name_without_middle():
    assert str(Name("Jim", None, "Knopf")) == "Jim Knopf"


def test_name_with_middle():
    assert str(Name("Donald", "Ervin", "Knuth")) == "Donald Ervin Knuth"


def test_empty_middle_is_still_printed():
    text = str(Name("A", "", "B"))
    assert text.split(" ") == ["A", "", "B"]