import re

import pytest

from zomescaffold.crud import Crud, parse_crud
from zomescaffold.naming import InvalidArgumentsError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("crud", Crud(update=True, delete=True)),
        ("cr", Crud(update=False, delete=False)),
        ("cru", Crud(update=True, delete=False)),
        ("crd", Crud(update=False, delete=True)),
        ("dcr", Crud(update=False, delete=True)),
    ],
)
def test_parse_crud(text, expected):
    assert parse_crud(text) == expected


def test_create_required():
    with pytest.raises(InvalidArgumentsError, match=re.escape("create ('c') must be present")):
        parse_crud("rud")


def test_read_required():
    with pytest.raises(InvalidArgumentsError, match=re.escape("read ('r') must be present")):
        parse_crud("cud")


def test_unknown_letter():
    with pytest.raises(
        InvalidArgumentsError,
        match=re.escape("Only 'c', 'r', 'u' and 'd' are allowed in the crud argument"),
    ):
        parse_crud("crux")


def test_create_checked_before_unknown_letters():
    with pytest.raises(InvalidArgumentsError, match="create"):
        parse_crud("rx")