"""Greeter stories: construction, validation, greeting text, default-name checks."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from reproducible_docs.domain.errors import InvalidNameError
from reproducible_docs.domain.greeter import NAME_REQUIRED_MESSAGE, Greeter
from reproducible_docs.domain.identity import DEFAULT_NAME

blank_names = st.text(alphabet=st.sampled_from(" \t\n\r\x0b\x0c\xa0\u2003\u3000"), max_size=12)
usable_names = st.text(min_size=1).filter(lambda s: s.strip() != "")


@pytest.mark.os_agnostic
def test_default_greeter_greets_with_product_name() -> None:
    assert Greeter().greeting() == "Hello from Reproducible Docs (v1.0.0)!"


@pytest.mark.os_agnostic
def test_custom_name_appears_in_greeting() -> None:
    assert Greeter("MyApp").greeting() == "Hello from MyApp (v1.0.0)!"


@pytest.mark.os_agnostic
def test_unicode_name_is_inserted_verbatim() -> None:
    assert Greeter("世界").greeting() == "Hello from 世界 (v1.0.0)!"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["", "  ", "\t\n"])
def test_blank_names_are_rejected(name: str) -> None:
    with pytest.raises(InvalidNameError, match="^Name must not be null or empty$"):
        Greeter(name)


@pytest.mark.os_agnostic
def test_none_name_is_rejected() -> None:
    with pytest.raises(InvalidNameError, match=NAME_REQUIRED_MESSAGE):
        Greeter(None)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_rejection_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Greeter("")


@pytest.mark.os_agnostic
def test_accepted_names_are_not_trimmed() -> None:
    greeter = Greeter("  padded name  ")

    assert greeter.name == "  padded name  "
    assert greeter.greeting() == "Hello from   padded name   (v1.0.0)!"


@pytest.mark.os_agnostic
def test_braces_in_name_are_not_reinterpreted() -> None:
    assert Greeter("{name} {version}").greeting() == "Hello from {name} {version} (v1.0.0)!"


@pytest.mark.os_agnostic
def test_default_greeter_reports_default_name() -> None:
    assert Greeter().is_default_name() is True
    assert Greeter(DEFAULT_NAME).is_default_name() is True


@pytest.mark.os_agnostic
def test_near_miss_of_default_name_is_not_default() -> None:
    assert Greeter("reproducible docs").is_default_name() is False
    assert Greeter(" Reproducible Docs").is_default_name() is False


@pytest.mark.os_agnostic
def test_name_cannot_be_reassigned() -> None:
    greeter = Greeter("MyApp")

    with pytest.raises(dataclasses.FrozenInstanceError):
        greeter.name = "Other"  # type: ignore[misc]


@pytest.mark.os_agnostic
@given(name=usable_names)
def test_any_usable_name_round_trips_into_greeting(name: str) -> None:
    greeter = Greeter(name)

    assert greeter.name == name
    assert greeter.greeting() == "Hello from " + name + " (v1.0.0)!"


@pytest.mark.os_agnostic
@given(name=blank_names)
def test_any_blank_name_is_rejected_with_fixed_message(name: str) -> None:
    with pytest.raises(InvalidNameError) as exc:
        Greeter(name)

    assert str(exc.value) == "Name must not be null or empty"


@pytest.mark.os_agnostic
@given(name=usable_names.filter(lambda s: s != DEFAULT_NAME))
def test_any_other_name_is_not_default(name: str) -> None:
    assert Greeter(name).is_default_name() is False


@pytest.mark.os_agnostic
@given(name=usable_names)
def test_accessors_are_idempotent(name: str) -> None:
    greeter = Greeter(name)

    assert greeter.greeting() == greeter.greeting()
    assert greeter.name == greeter.name
    assert greeter.is_default_name() == greeter.is_default_name()
