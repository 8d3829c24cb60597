from optionstore.core.coercion import as_bool, as_int, as_string, parse_int
from optionstore.core.types import TypeTag

OPAQUE = TypeTag.opaque("geometry.Point")


def test_parse_int():
    assert parse_int("999999") == 999999
    assert parse_int("-12") == -12
    assert parse_int("+7") == 7
    assert parse_int("") is None
    assert parse_int(" 1") is None
    assert parse_int("1_000") is None
    assert parse_int("0x10") is None
    assert parse_int("1.0") is None


def test_as_bool():
    assert as_bool(TypeTag.BOOL, True) == (True, True)
    assert as_bool(TypeTag.INT, 0) == (False, True)
    assert as_bool(TypeTag.INT, -3) == (True, True)
    assert as_bool(TypeTag.STRING, "FaLsE") == (False, True)
    assert as_bool(TypeTag.STRING, "0") == (False, True)
    assert as_bool(TypeTag.STRING, "no") == (True, True)
    assert as_bool(TypeTag.STRING, "") == (True, True)
    assert as_bool(OPAQUE, object()) == (False, False)


def test_as_int():
    assert as_int(TypeTag.INT, 99) == (99, True)
    assert as_int(TypeTag.BOOL, False) == (0, True)
    assert as_int(TypeTag.BOOL, True) == (1, True)
    assert as_int(TypeTag.STRING, "42") == (42, True)
    assert as_int(TypeTag.STRING, "hello") == (0, False)
    assert as_int(OPAQUE, object()) == (0, False)


def test_as_string():
    assert as_string(TypeTag.STRING, "test value") == ("test value", True)
    assert as_string(TypeTag.BOOL, True) == ("true", True)
    assert as_string(TypeTag.BOOL, False) == ("false", True)
    assert as_string(TypeTag.INT, -5) == ("-5", True)
    assert as_string(OPAQUE, object()) == ("", False)
