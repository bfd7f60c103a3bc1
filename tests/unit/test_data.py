"""
Unit tests for the example data records.
"""

import dataclasses
import inspect

import pytest
from faker import Faker

from playground.data import PlaygroundData, default_data, random_block_form
from playground.pages import FormLayoutPage


pytestmark = pytest.mark.unit


def test_default_data_is_shared_and_immutable():
    data = default_data()

    assert data is default_data()
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.first_name = "Changed"


def test_block_form_record_values():
    assert default_data().block_form() == {
        "first_name": "Depan",
        "last_name": "Belakang",
        "email": "depanbelakangnama@gmail.com",
        "website": "websitenamalengkap.com",
    }


def test_block_form_keys_match_page_operation():
    params = list(inspect.signature(FormLayoutPage.fill_block_form).parameters)[1:]

    assert list(default_data().block_form()) == params
    assert list(random_block_form(Faker())) == params


def test_date_range_bounds():
    data = PlaygroundData()

    assert (data.date_range_start, data.date_range_end) == ("1", "31")


def test_random_block_form_is_reproducible_with_seed():
    first, second = Faker(), Faker()
    first.seed_instance(1234)
    second.seed_instance(1234)

    assert random_block_form(first) == random_block_form(second)
    assert "@" in random_block_form(first)["email"]


def test_random_block_form_uses_given_generator(fake):
    record = random_block_form(fake)

    assert all(record.values())
    assert record["email"] != default_data().email_block_form
