import pytest

from core.coerce import to_bool, to_int, to_str


@pytest.mark.parametrize('value, expected', [
    (None, 0),
    (12, 12),
    ('12', 12),
    (' 7 ', 7),
    ('3.9', 3),
    (4.0, 4),
    ('', 0),
    ('abc', 0),
    ('1_000', 0),
    ('\u0661\u0662', 0),
    ('1e3', 1000),
    ('+5', 5),
    ('0x10', 0),
    ('nan', 0),
    ('inf', 0),
    (True, 0),
    ([1], 0),
])
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_to_int_custom_default():
    assert to_int('oops', default=-1) == -1


@pytest.mark.parametrize('value, expected', [
    ('true', True),
    ('TRUE', True),
    ('True', True),
    ('false', False),
    ('yes', False),
    ('1', False),
    (' true', False),
    ('true\n', False),
    ('TRUE\n', False),
    ('', False),
    (1, False),
])
def test_to_bool_is_strict(value, expected):
    assert to_bool(value) is expected


def test_to_bool_absent_uses_default():
    assert to_bool(None) is False
    assert to_bool(None, default=True) is True


def test_to_str():
    assert to_str(None) == ''
    assert to_str(None, default='x') == 'x'
    assert to_str('') == ''
    assert to_str(5) == '5'
