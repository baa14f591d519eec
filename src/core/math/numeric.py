"""
Numeric — Generic числовые примитивы

Модуль предоставляет базовые операции над любым типом представления,
удовлетворяющим capability-предикатам:
- absolute: модуль числа с учётом знаковости ТИПА (не только значения)
- gcd: НОД по алгоритму Евклида (остаток от деления)
- lcm: НОК через (lhs // gcd) * rhs

Все функции — functools.singledispatch: пользовательский тип
представления может зарегистрировать собственный overload
(absolute.register(MyType)). Неоднозначный dispatch → RuntimeError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0 и не зависит от знаков операндов
2. gcd(0, 0) == 0 (явный short-circuit)
3. lcm НЕ нормализует знак и НЕ защищён от lcm(0, 0) (ZeroDivisionError)
4. Переполнение представления не проверяется
"""

from functools import singledispatch
from typing import Any

from src.core.math.integral import common_type
from src.core.math.type_traits import (
    is_lessthan_comparable,
    is_negatable,
    is_signed,
    require_capabilities,
)


# =============================================================================
# ABSOLUTE VALUE
# =============================================================================


@singledispatch
def absolute(value: Any) -> Any:
    """
    Модуль числа.

    Тип value обязан быть negatable и lessthan_comparable, иначе
    CapabilityError поднимается до вычислений. Отрицание выполняется
    только для знаковых типов: для беззнаковых value возвращается
    как есть, даже если -value определён.

    Args:
        value: Значение типа представления

    Returns:
        Значение того же типа, >= 0 для знаковых типов

    Raises:
        CapabilityError: Если тип не поддерживает '-' или '<'

    Examples:
        >>> absolute(-42)
        42
        >>> absolute(-2.0)
        2.0
    """
    tp = type(value)
    require_capabilities(tp, is_negatable, is_lessthan_comparable)

    if is_signed(tp) and value < tp(0):
        return -value

    return value


def _require_absolute_support(value: Any) -> None:
    """Capability-guard для типов без зарегистрированного overload absolute."""
    tp = type(value)
    if absolute.dispatch(tp) is absolute.dispatch(object):
        require_capabilities(tp, is_negatable, is_lessthan_comparable)


# =============================================================================
# GREATEST COMMON DIVISOR
# =============================================================================


@singledispatch
def gcd(lhs: Any, rhs: Any) -> Any:
    """
    Наибольший общий делитель lhs и rhs.

    Алгоритм Евклида на модулях операндов: большее значение заменяется
    остатком от деления на меньшее, пока одно из них не станет нулём.
    Результат имеет тип common_type(type(lhs), type(rhs)).

    Args:
        lhs: Левый операнд
        rhs: Правый операнд (тип может отличаться от lhs)

    Returns:
        НОД >= 0; 0 только если оба операнда равны 0

    Examples:
        >>> gcd(8, 18)
        2
        >>> gcd(12, -144)
        12
        >>> gcd(0, 0)
        0
    """
    _require_absolute_support(lhs)
    _require_absolute_support(rhs)

    common_t = common_type(type(lhs), type(rhs))

    if not lhs and not rhs:
        return common_t(0)

    left = common_t(absolute(lhs))
    right = common_t(absolute(rhs))

    while left and right:
        if left > right:
            left %= right
        else:
            right %= left

    return right if right > left else left


# =============================================================================
# LEAST COMMON MULTIPLE
# =============================================================================


@singledispatch
def lcm(lhs: Any, rhs: Any) -> Any:
    """
    Наименьшее общее кратное lhs и rhs.

    Деление выполняется ДО умножения: это уменьшает (но не устраняет)
    риск переполнения. Знак результата не нормализуется.

    Raises:
        ZeroDivisionError: Если lhs == rhs == 0 (gcd вернул 0)

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-4, 6)
        -12
    """
    return (lhs // gcd(lhs, rhs)) * rhs
