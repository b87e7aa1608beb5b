import operator

import pytest

from stdtour.numeric import (
    accumulate,
    clamp,
    describe_float,
    every_second,
    exclusive_scan,
    float_roundtrip,
    for_each_n,
    inclusive_scan,
    last_five,
    parse_int_lenient,
    parse_int_prefix,
    repeated_sequence,
    squared_sum,
    transform_exclusive_scan,
    transform_inclusive_scan,
    transform_reduce,
    transform_reduce_pairs,
)

COLL = [3, 1, 7, 5, 4, 1, 6, 3]
SCAN_COLL = [3, 1, 7, 0, 4, 1, 6, 3]


def test_repeated_sequence_shape():
    seq = repeated_sequence(3)
    assert len(seq) == 12
    assert seq[:4] == [1, 2, 3, 4]
    assert seq[8:] == [1, 2, 3, 4]
    assert repeated_sequence(0) == []


@pytest.mark.parametrize("num", [1, 1000, 100000])
def test_accumulate_scales_with_repetitions(num):
    one = accumulate(repeated_sequence(1))
    assert accumulate(repeated_sequence(num)) == num * one


@pytest.mark.parametrize("num", [1, 1000])
def test_squared_sum_scales_with_repetitions(num):
    one = squared_sum(repeated_sequence(1))
    assert squared_sum(repeated_sequence(num)) == num * one


def test_accumulate_product_and_zero_initial():
    product = accumulate(COLL, 1, operator.mul)
    assert product == accumulate(reversed(COLL), 1, operator.mul)
    assert accumulate(COLL, 0, operator.mul) == 0
    assert accumulate([], 7) == 7


def test_inclusive_scan_invariants():
    result = inclusive_scan(SCAN_COLL)
    assert len(result) == len(SCAN_COLL)
    assert result[0] == SCAN_COLL[0]
    assert result[-1] == accumulate(SCAN_COLL)
    assert all(b - a == v for a, b, v in zip(result, result[1:], SCAN_COLL[1:]))


def test_inclusive_scan_with_initial_offsets_results():
    plain = inclusive_scan(SCAN_COLL)
    offset = inclusive_scan(SCAN_COLL, operator.add, 100)
    assert [b - a for a, b in zip(plain, offset)] == [100] * len(plain)


def test_exclusive_scan_is_shifted_inclusive_scan():
    inclusive = inclusive_scan(SCAN_COLL)
    assert exclusive_scan(SCAN_COLL, 0) == [0] + inclusive[:-1]
    with_initial = exclusive_scan(SCAN_COLL, 100)
    assert with_initial[0] == 100
    assert len(with_initial) == len(SCAN_COLL)


def test_transform_reduce_matches_mapped_accumulate():
    doubled = [v * 2 for v in COLL]
    assert transform_reduce(COLL, 0, operator.add, lambda v: v * 2) == accumulate(doubled)
    assert transform_reduce(COLL, 0, operator.add, lambda v: v * v) == squared_sum(COLL)


def test_transform_reduce_pairs_defaults_give_squared_sum():
    assert transform_reduce_pairs(COLL, COLL) == squared_sum(COLL)


def test_transform_reduce_pairs_product_of_differences():
    other = [1, 2, 3, 4, 5, 6, 7, 8]
    diffs = [a - b for a, b in zip(COLL, other)]
    result = transform_reduce_pairs(COLL, other, 1, operator.mul, operator.sub)
    assert result == accumulate(diffs, 1, operator.mul)


def test_transform_reduce_pairs_string_concatenation():
    result = transform_reduce_pairs(
        [3, 1], [1, 2], "", operator.add, lambda x, y: f"{x}{y} "
    )
    assert result == "31 12 "


def test_transform_reduce_pairs_second_too_short():
    with pytest.raises(ValueError):
        transform_reduce_pairs([1, 2, 3], [1, 2])


def test_transform_scans_equal_scans_of_transformed_values():
    twice = [v * 2 for v in SCAN_COLL]
    assert transform_inclusive_scan(SCAN_COLL, operator.add, lambda v: v * 2) == inclusive_scan(twice)
    assert transform_inclusive_scan(
        SCAN_COLL, operator.add, lambda v: v * 2, 100
    ) == inclusive_scan(twice, operator.add, 100)
    assert transform_exclusive_scan(
        SCAN_COLL, 100, operator.add, lambda v: v * 2
    ) == exclusive_scan(twice, 100)


@pytest.mark.parametrize("value,expected", [(-7, 5), (0, 5), (8, 8), (15, 13)])
def test_clamp(value, expected):
    assert clamp(value, 5, 13) == expected


def test_clamp_reversed_bounds():
    with pytest.raises(ValueError):
        clamp(1, 13, 5)


@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("  077", None), ("hello", None), ("0x33", 0), ("+5", None), ("-5abc", -5)],
)
def test_parse_int_prefix(text, expected):
    assert parse_int_prefix(text) == expected


def test_parse_int_prefix_out_of_range():
    assert parse_int_prefix("99999999999") is None
    assert parse_int_prefix("-2147483648") == -2147483648


@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("  077", 77), ("hello", None), ("0x33", 0), ("+5", 5)],
)
def test_parse_int_lenient(text, expected):
    assert parse_int_lenient(text) == expected


def test_parse_int_lenient_out_of_range():
    assert parse_int_lenient("2147483648") is None
    assert parse_int_lenient(" 2147483647") == 2147483647


@pytest.mark.parametrize(
    "value",
    [
        0.1 + 0.3 + 0.00001,
        0.00001 + 0.3 + 0.1,
        0.1,
        -2.5,
        1e300,
        5e-324,
        123456789.0,
        0.0,
    ],
)
def test_float_roundtrip_is_exact_and_short(value):
    text, back = float_roundtrip(value)
    assert back == value
    assert float(text) == value
    assert len(text) <= len(repr(value))


def test_float_roundtrip_formats():
    assert float_roundtrip(0.1)[0] == "0.1"
    assert float_roundtrip(100000.0)[0] == "1e+05"


def test_describe_float_pinned():
    assert describe_float(float.fromhex("0x1p4")) == "dec:     16  hex: 0x1p+4"


@pytest.mark.parametrize("value", [16.0, 10.0, 40.0, 5.0, 1e5, 49.625])
def test_describe_float_hex_part_roundtrips(value):
    text = describe_float(value)
    dec_part, hex_part = text.split("  hex: ")
    assert float.fromhex(hex_part) == value
    assert float(dec_part[len("dec: "):]) == value
    mantissa = hex_part.split("p")[0]
    assert not mantissa.endswith("0") or "." not in mantissa


def test_for_each_n_visits_prefix():
    coll = [str(i) for i in range(100)]
    seen = []
    for_each_n(coll, 10, seen.append)
    assert seen == coll[:10]


def test_for_each_n_can_modify_mutable_elements():
    cells = [[str(i)] for i in range(10)]
    for_each_n(cells, 5, lambda cell: cell.__setitem__(0, "value" + cell[0]))
    assert [c[0] for c in cells[:5]] == [f"value{i}" for i in range(5)]
    assert [c[0] for c in cells[5:]] == [str(i) for i in range(5, 10)]


def test_for_each_n_too_few_elements():
    with pytest.raises(IndexError):
        for_each_n([1, 2], 3, lambda x: None)


def test_last_five_short_collection():
    assert last_five([1, 2, 3]) == "3 elems: 1 2 3 "


def test_last_five_long_collection():
    items = list(range(1, 21))
    text = last_five(items)
    assert text.startswith(f"{len(items)} elems: ... ")
    assert text.endswith(" ".join(str(v) for v in items[-5:]) + " ")


def test_every_second():
    assert every_second("abcde") == ["a", "c", "e"]
    assert every_second([]) == []