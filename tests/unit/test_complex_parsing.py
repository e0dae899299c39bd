"""
Тесты для парсера текстового формата Complex

Грамматика: [<real>][<sign><imag>i]

Проверяет:
1. Канонические формы (a+bi, a-bi, bi, -i, a)
2. Разбиение термов с учётом экспоненты (1e-5 не разрывается)
3. Категории ошибок: EMPTY / INVALID_REAL / INVALID_IMAGINARY
4. Задокументированную особенность: при повторе терма побеждает последний
"""

import math

import pytest

from src.core.math.complex import Complex, ComplexParseError, ParseErrorKind


class TestParseCanonicalForms:
    """Канонические формы"""

    @pytest.mark.parametrize(
        "text, real, imag",
        [
            ("2+3i", 2.0, 3.0),
            ("-1.5-2.5i", -1.5, -2.5),
            ("3i", 0.0, 3.0),
            ("-i", 0.0, -1.0),
            ("i", 0.0, 1.0),
            ("+i", 0.0, 1.0),
            ("5", 5.0, 0.0),
            ("-5", -5.0, 0.0),
            ("2-i", 2.0, -1.0),
            ("2+i", 2.0, 1.0),
            ("-3i", 0.0, -3.0),
            ("0.5", 0.5, 0.0),
            (".5+.25i", 0.5, 0.25),
        ],
    )
    def test_parse(self, text: str, real: float, imag: float) -> None:
        z = Complex.parse(text)
        assert z.real == real
        assert z.imag == imag

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert Complex.parse("  2+3i \n") == Complex(2.0, 3.0)

    def test_imaginary_first(self) -> None:
        """Порядок термов не важен"""
        assert Complex.parse("3i+2") == Complex(2.0, 3.0)
        assert Complex.parse("-4i-1") == Complex(-1.0, -4.0)


class TestParseExponents:
    """Знак после e/E не начинает новый терм"""

    def test_negative_exponent_real(self) -> None:
        assert Complex.parse("1e-5+2i") == Complex(1e-5, 2.0)

    def test_negative_exponent_imaginary(self) -> None:
        assert Complex.parse("2+1e-3i") == Complex(2.0, 1e-3)

    def test_uppercase_exponent_both_parts(self) -> None:
        assert Complex.parse("-2.5E+3-1E-2i") == Complex(-2500.0, -0.01)

    def test_pure_real_with_exponent(self) -> None:
        assert Complex.parse("6.02e23") == Complex(6.02e23, 0.0)


class TestParseSpecialValues:
    """inf/nan принимаются как float-литералы"""

    def test_nan_real(self) -> None:
        z = Complex.parse("nan+1i")
        assert math.isnan(z.real)
        assert z.imag == 1.0

    def test_nan_imaginary(self) -> None:
        z = Complex.parse("1+nani")
        assert z.real == 1.0
        assert math.isnan(z.imag)

    def test_infinite_imaginary(self) -> None:
        assert Complex.parse("2-infi") == Complex(2.0, -math.inf)

    def test_bare_inf_is_classified_as_imaginary(self) -> None:
        """Терм "inf" содержит "i" и поэтому попадает в мнимую часть"""
        assert Complex.parse("inf") == Complex(0.0, math.inf)


class TestParseErrors:
    """Категории ошибок"""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text: str) -> None:
        with pytest.raises(ComplexParseError, match="Empty string") as exc_info:
            Complex.parse(text)
        assert exc_info.value.kind is ParseErrorKind.EMPTY

    @pytest.mark.parametrize(
        "text", ["abc", "1.2.3", "3x+2i", "1_000", "--5", "1 5", "３", "٣+٤i", "1e٣"]
    )
    def test_invalid_real(self, text: str) -> None:
        with pytest.raises(ComplexParseError, match="Invalid real part") as exc_info:
            Complex.parse(text)
        assert exc_info.value.kind is ParseErrorKind.INVALID_REAL

    @pytest.mark.parametrize("text", ["2+xi", "ji", "1+2.2.2i", "5+1_0i", "２i", "1+٤i"])
    def test_invalid_imaginary(self, text: str) -> None:
        with pytest.raises(ComplexParseError, match="Invalid imaginary part") as exc_info:
            Complex.parse(text)
        assert exc_info.value.kind is ParseErrorKind.INVALID_IMAGINARY

    def test_error_carries_offending_text(self) -> None:
        with pytest.raises(ComplexParseError) as exc_info:
            Complex.parse("2+xi")
        assert exc_info.value.text == "+x"

    def test_parse_error_is_value_error(self) -> None:
        """Ошибка парсинга — восстановимая ValueError, не нарушение контракта"""
        assert issubclass(ComplexParseError, ValueError)
        assert not issubclass(ComplexParseError, AssertionError)


class TestParseRepeatedTerms:
    """
    Задокументированная особенность: повторяющиеся термы одного вида не
    суммируются и не вызывают ошибку, побеждает последний.
    """

    def test_last_real_term_wins(self) -> None:
        assert Complex.parse("1+2+3i") == Complex(2.0, 3.0)

    def test_last_imaginary_term_wins(self) -> None:
        assert Complex.parse("1+2i-5i") == Complex(1.0, -5.0)
