import pytest

from pointbus.types import Bool, type_of


@pytest.mark.parametrize(
    "value1, value2, target",
    [(True, True, True), (True, False, True), (False, True, True), (False, False, False)],
)
def test_add(value1, value2, target):
    assert (Bool(value1) + Bool(value2)).value == target


@pytest.mark.parametrize(
    "value1, value2, target",
    [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
)
def test_mul(value1, value2, target):
    assert (Bool(value1) * Bool(value2)).value == target


@pytest.mark.parametrize(
    "value1, value2, target",
    [(True, True, True), (True, False, True), (False, True, True), (False, False, False)],
)
def test_bit_or(value1, value2, target):
    assert (Bool(value1) | Bool(value2)).value == target


@pytest.mark.parametrize(
    "value1, value2, target",
    [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
)
def test_bit_and(value1, value2, target):
    assert (Bool(value1) & Bool(value2)).value == target


def test_not():
    assert (~Bool(True)).value is False
    assert (~Bool(False)).value is True


def test_truthiness_and_str():
    assert bool(Bool(True)) is True
    assert bool(Bool(False)) is False
    assert str(Bool(True)) == "true"
    assert str(Bool(False)) == "false"


def test_ordering_and_equality():
    assert Bool(False) < Bool(True)
    assert Bool(True) == Bool(True)


def test_type_of_bool():
    assert type_of(Bool(False)) == "pointbus.types.Bool"


def test_type_of_builtin():
    assert type_of(17) == "int"