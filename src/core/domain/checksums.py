"""Dígitos verificadores de CPF y CNPJ.

Los documentos llegan como enteros sin separadores, así que los ceros a la
izquierda se pierden: las longitudes aceptadas son rangos y no valores fijos.
Todo es aritmética entera exacta.
"""

from __future__ import annotations

CPF_MIN_LENGTH = 8
CPF_MAX_LENGTH = 12
CNPJ_MIN_LENGTH = 12
CNPJ_MAX_LENGTH = 16


def _digit_at(value: int, place: int) -> int:
    """Digit at base-10 place `place` (0 = units)."""

    return (value // 10**place) % 10


def _check_digits(value: int) -> tuple[int, int]:
    dig1, dig2 = divmod(value % 100, 10)
    return dig1, dig2


def is_cpf(value: int, *, remap_ten: bool = False) -> bool:
    """Verify `value` against the CPF weighted-sum-mod-11 rule.

    With ``remap_ten`` a remainder of 10 counts as check digit 0, as in the
    official algorithm. Without it such documents are rejected.
    """

    if value <= 0:
        return False
    length = len(str(value))
    if length < CPF_MIN_LENGTH or length > CPF_MAX_LENGTH:
        return False

    dig1, dig2 = _check_digits(value)
    val1 = 0
    val2 = 0
    for i in range(3, length + 1):
        x = _digit_at(value, i - 1)
        val1 += x * (i - 1)
        val2 += x * i
    val2 += dig1 * 2

    val1 = (val1 * 10) % 11
    val2 = (val2 * 10) % 11
    if remap_ten:
        val1 %= 10
        val2 %= 10
    return val1 == dig1 and val2 == dig2


def is_cnpj(value: int) -> bool:
    """Verify `value` against the CNPJ rule (weights 2..9 cycling from the right)."""

    if value <= 0:
        return False
    length = len(str(value))
    if length < CNPJ_MIN_LENGTH or length > CNPJ_MAX_LENGTH:
        return False

    dig1, dig2 = _check_digits(value)
    val1 = 0
    val2 = 0
    for i in range(length - 2):
        x = _digit_at(value, i + 2)
        val1 += x * ((i % 8) + 2)
        val2 += x * (((i + 1) % 8) + 2)
    val2 += dig1 * 2

    return _cnpj_digit(val1) == dig1 and _cnpj_digit(val2) == dig2


def _cnpj_digit(total: int) -> int:
    remainder = total % 11
    if remainder < 2:
        return 0
    return 11 - remainder
