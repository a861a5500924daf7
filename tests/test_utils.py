import pytest

from texsolve.utils import trim_trailing


def test_trims_zeros_after_decimal():
    assert trim_trailing("0", "2.500") == "2.5"


def test_trims_dot_after_zeros():
    assert trim_trailing("0", "3.000") == "3"


def test_trims_zeros_of_whole_number():
    assert trim_trailing("0", "100") == "1"


def test_leaves_text_without_suffix():
    assert trim_trailing("0", "abc") == "abc"


def test_result_has_no_trailing_character():
    result = trim_trailing("x", "axxxx")
    assert not result.endswith("x")
    assert "axxxx".startswith(result)


def test_only_one_dot_removed():
    result = trim_trailing("0", "7..00")
    assert result.count(".") == 1


def test_rejects_multi_character_end():
    with pytest.raises(ValueError):
        trim_trailing("00", "100")