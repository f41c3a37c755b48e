import json

import numpy as np
import pytest

from quantpdf.config import MAX_UINT32
from quantpdf.densities import GaussianDensity
from quantpdf.density_set import DensityFunctionSet
from quantpdf.errors import IndexOutOfRange, ProtocolViolation
from quantpdf.table import QuantizedFrequencyTable


@pytest.fixture
def uniform_table() -> QuantizedFrequencyTable:
    return QuantizedFrequencyTable.from_frequencies([1] * 256)


@pytest.fixture
def skewed_table() -> QuantizedFrequencyTable:
    freqs = [1] * 256
    freqs[0] = 5
    freqs[128] = 1000
    freqs[255] = 7
    return QuantizedFrequencyTable.from_frequencies(freqs)


@pytest.fixture
def gaussian_table() -> QuantizedFrequencyTable:
    return DensityFunctionSet(
        [
            GaussianDensity(height=10.0, width=5.0, mean=128),
            GaussianDensity(height=10.0, width=2.0, mean=30),
            GaussianDensity(height=2.0, width=5.0, mean=70),
        ]
    ).finalize()


def test_cumulative_is_exclusive_prefix_sum(skewed_table):
    assert skewed_table.cumulative(0) == 0
    assert skewed_table.cumulative(1) == 5
    assert skewed_table.cumulative(128) == 5 + 127
    assert skewed_table.cumulative(129) == 5 + 127 + 1000
    assert skewed_table.total() == 5 + 1000 + 7 + 253


def test_count_and_cumulative_reject_out_of_range(uniform_table):
    for bad in (-1, 256, 1000):
        with pytest.raises(IndexOutOfRange):
            uniform_table.count(bad)
        with pytest.raises(IndexOutOfRange):
            uniform_table.cumulative(bad)


def test_index_out_of_range_is_index_error(uniform_table):
    with pytest.raises(IndexError):
        uniform_table.count(300)


def test_non_integer_symbols_rejected(uniform_table):
    with pytest.raises(IndexOutOfRange):
        uniform_table.count(1.5)
    with pytest.raises(IndexOutOfRange):
        uniform_table.count(True)


def test_numpy_integer_symbols_accepted(skewed_table):
    assert skewed_table.count(np.uint8(128)) == 1000


def test_locate_uniform(uniform_table):
    for r in range(256):
        assert uniform_table.locate(r) == r


def test_locate_interval_edges(skewed_table):
    assert skewed_table.locate(0) == 0
    assert skewed_table.locate(4) == 0
    assert skewed_table.locate(5) == 1
    start = skewed_table.cumulative(128)
    assert skewed_table.locate(start - 1) == 127
    assert skewed_table.locate(start) == 128
    assert skewed_table.locate(start + 999) == 128
    assert skewed_table.locate(start + 1000) == 129
    assert skewed_table.locate(skewed_table.total() - 1) == 255


def test_locate_inverts_every_interval(gaussian_table):
    for i in range(256):
        lo = gaussian_table.cumulative(i)
        hi = lo + gaussian_table.count(i) - 1
        assert gaussian_table.locate(lo) == i
        assert gaussian_table.locate(hi) == i
        assert gaussian_table.locate((lo + hi) // 2) == i


def test_locate_rejects_residual_at_or_above_total(skewed_table):
    with pytest.raises(ProtocolViolation) as excinfo:
        skewed_table.locate(skewed_table.total())
    assert excinfo.value.total == skewed_table.total()
    with pytest.raises(ProtocolViolation):
        skewed_table.locate(skewed_table.total() + 12345)


def test_locate_rejects_negative_residual(skewed_table):
    with pytest.raises(ProtocolViolation):
        skewed_table.locate(-1)


def test_from_frequencies_validation():
    with pytest.raises(ValueError):
        QuantizedFrequencyTable.from_frequencies([1] * 255)
    with pytest.raises(ValueError):
        QuantizedFrequencyTable.from_frequencies([0] + [1] * 255)
    with pytest.raises(ValueError):
        QuantizedFrequencyTable.from_frequencies([MAX_UINT32] + [1] * 255)
    with pytest.raises(TypeError):
        QuantizedFrequencyTable.from_frequencies([1.5] * 256)


def test_max_total_is_accepted():
    table = QuantizedFrequencyTable.from_frequencies([MAX_UINT32 - 255] + [1] * 255)
    assert table.total() == MAX_UINT32
    assert table.locate(MAX_UINT32 - 1) == 255
    assert table.locate(MAX_UINT32 - 256) == 0


def test_frequencies_are_plain_ints(skewed_table):
    freqs = skewed_table.frequencies()
    cums = skewed_table.cumulative_frequencies()
    assert len(freqs) == len(cums) == len(skewed_table) == 256
    assert all(type(f) is int for f in freqs)
    assert cums[0] == 0


def test_backing_arrays_are_read_only(skewed_table):
    with pytest.raises(ValueError):
        skewed_table._freq[0] = 99


def test_format_rows_is_pure(skewed_table, capsys):
    text = skewed_table.format_rows()
    captured = capsys.readouterr()
    assert captured.out == ""
    lines = text.splitlines()
    assert len(lines) == 256
    assert lines[0] == "000: 5"
    assert lines[128] == "128: 1000"


def test_rows_triples(skewed_table):
    rows = skewed_table.rows()
    assert rows[0] == (0, 5, 0)
    assert rows[1] == (1, 1, 5)


def test_probability_and_entropy(uniform_table):
    assert uniform_table.probability(3) == pytest.approx(1 / 256)
    assert uniform_table.entropy() == pytest.approx(8.0)


def test_codelength(uniform_table, gaussian_table):
    assert uniform_table.codelength([0, 1, 2]) == pytest.approx(24.0)
    # Peak symbol is cheaper than a floor symbol
    assert gaussian_table.codelength([128]) < gaussian_table.codelength([255])


def test_to_dict_is_json_ready(gaussian_table):
    meta = gaussian_table.to_dict()
    for key in ["alphabet_name", "alphabet_size", "total", "min_count", "max_count", "entropy_bits"]:
        assert key in meta
    assert meta["min_count"] == 1
    json.dumps(meta)


def test_value_equality_and_hash(skewed_table):
    same = QuantizedFrequencyTable.from_frequencies(skewed_table.frequencies())
    assert same == skewed_table
    assert hash(same) == hash(skewed_table)
    assert same != QuantizedFrequencyTable.from_frequencies([1] * 256)


def test_repr_mentions_total(skewed_table):
    assert str(skewed_table.total()) in repr(skewed_table)
