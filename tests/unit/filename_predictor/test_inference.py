"""Tests for role and format inference."""

import pytest

from services.filename_predictor.app.config import Settings
from services.filename_predictor.app.model import FormatInferencer, RoleInferencer, render_number
from services.filename_predictor.app.tokenizer import RoleTag, TypeTag
from services.filename_predictor.app.tokenizer.classifier import format_digits, parse_digits


class TestRoleInferencer:
    """Test RoleInferencer rules in priority order."""

    def setup_method(self):
        """Set up test fixture."""
        self.inferencer = RoleInferencer(Settings())

    def test_structural_types_are_constant(self):
        """Test separators and extensions are constant whatever their values."""
        assert self.inferencer.infer(TypeTag.SEP, {"_": 3}, []) is RoleTag.CONSTANT
        assert self.inferencer.infer(TypeTag.EXT, {"jpg": 1, "png": 1}, []) is RoleTag.CONSTANT

    def test_dates_win_over_single_value(self):
        """Test the date rule fires before the constant rule."""
        assert self.inferencer.infer(TypeTag.DATE, {"20240101": 3}, []) is RoleTag.DATE

    def test_single_value_is_constant(self):
        """Test one distinct value makes a constant."""
        assert self.inferencer.infer(TypeTag.ALPHA, {"IMG": 5}, []) is RoleTag.CONSTANT
        assert self.inferencer.infer(TypeTag.NUMERIC, {"001": 2}, [1, 1]) is RoleTag.CONSTANT

    def test_dense_numbers_are_an_index(self):
        """Test density above one half."""
        assert self.inferencer.infer(TypeTag.NUMERIC, {"1": 1, "3": 1}, [1, 3]) is RoleTag.INDEX

    def test_density_threshold_is_strict(self):
        """Test a density of exactly one half is not an index."""
        assert RoleInferencer.density([1, 4]) == 0.5
        assert self.inferencer.infer(TypeTag.NUMERIC, {"1": 1, "4": 1}, [1, 4]) is RoleTag.UNKNOWN

    def test_sparse_numbers_are_unknown(self):
        """Test low density."""
        assert self.inferencer.infer(TypeTag.NUMERIC, {"1": 1, "100": 1}, [1, 100]) is RoleTag.UNKNOWN

    def test_varied_words_are_unknown(self):
        """Test the fallback rule."""
        assert self.inferencer.infer(TypeTag.ALPHA, {"Alpha": 1, "Beta": 1}, []) is RoleTag.UNKNOWN

    def test_density_with_huge_integers(self):
        """Test density is computed exactly for values beyond 64 bits."""
        base = 2**80
        assert RoleInferencer.density([base, base + 1, base + 2]) == 1.0

    def test_custom_threshold(self):
        """Test the density threshold comes from settings."""
        inferencer = RoleInferencer(Settings(index_density_threshold=0.1))
        assert inferencer.infer(TypeTag.NUMERIC, {"1": 1, "10": 1}, [1, 10]) is RoleTag.INDEX


class TestFormatInferencer:
    """Test FormatInferencer functionality."""

    def setup_method(self):
        """Set up test fixture."""
        self.inferencer = FormatInferencer()

    def test_zero_padded_numbers(self):
        """Test common width above one yields a zero-pad format."""
        assert self.inferencer.infer(TypeTag.NUMERIC, ["001", "002", "010"]) == "%03d"

    def test_single_digit_numbers(self):
        """Test width one renders naturally."""
        assert self.inferencer.infer(TypeTag.NUMERIC, ["1", "2"]) is None

    def test_mixed_widths(self):
        """Test differing widths render naturally."""
        assert self.inferencer.infer(TypeTag.NUMERIC, ["99", "100"]) is None

    def test_date_formats(self):
        """Test date layouts."""
        assert self.inferencer.infer(TypeTag.DATE, ["20240101"]) == "yyyyMMdd"
        assert self.inferencer.infer(TypeTag.DATE, ["2024-01-01"]) == "yyyy-MM-dd"
        assert self.inferencer.infer(TypeTag.DATE, ["240101"]) is None

    def test_other_types_have_no_format(self):
        """Test words and extensions."""
        assert self.inferencer.infer(TypeTag.ALPHA, ["abc"]) is None
        assert self.inferencer.infer(TypeTag.EXT, ["jpg"]) is None
        assert self.inferencer.infer(TypeTag.NUMERIC, []) is None


class TestRenderNumber:
    """Test number rendering."""

    @pytest.mark.parametrize(
        ("value", "fmt", "expected"),
        [
            (5, "%03d", "005"),
            (1234, "%03d", "1234"),
            (7, None, "7"),
            (7, "yyyyMMdd", "7"),
            (10**30, "%05d", str(10**30)),
            (42, "%06d", "000042"),
        ],
    )
    def test_render(self, value, fmt, expected):
        """Test zero padding and natural rendering."""
        assert render_number(value, fmt) == expected

    def test_render_beyond_string_conversion_limit(self):
        """Test integers with more digits than int/str conversions accept."""
        digits = "9" * 5000
        value = parse_digits(digits)

        assert render_number(value, None) == digits
        assert render_number(value + 1, None) == "1" + "0" * 5000
        assert render_number(7, "%05000d") == "0" * 4999 + "7"


class TestDigitHelpers:
    """Test exact parsing and rendering of long digit runs."""

    @pytest.mark.parametrize("digits", ["0", "007", "1" * 4000, "1" * 4001, "12345" * 2000])
    def test_parse_digits(self, digits):
        """Test values match the digit run, chunk boundaries included."""
        value = parse_digits(digits)
        assert format_digits(value) == (digits.lstrip("0") or "0")

    def test_parse_digits_exact_value(self):
        """Test the parsed value against arithmetic."""
        assert parse_digits("1" + "0" * 8000) == 10**8000
        assert parse_digits("4" * 4001) % 10 == 4

    def test_format_digits_pads_inner_chunks(self):
        """Test zero chunks inside a large number are kept."""
        value = 10**9000 + 5
        assert format_digits(value) == "1" + "0" * 8999 + "5"
        assert format_digits(-value) == "-1" + "0" * 8999 + "5"

    def test_non_ascii_digits(self):
        """Test decimal digits from other scripts."""
        assert parse_digits("١٢٣") == 123
