"""
Integral — Fixed-Width целочисленные типы представления

Тип представления рационального числа: целое фиксированной ширины.
Python int не ограничен, поэтому ширина моделируется явно:
- IntegralSpec — валидируемое описание (bits, signed)
- FixedWidthInteger — int-подкласс с wraparound-арифметикой
- common_type — тип, к которому приводятся смешанные операнды

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение всегда лежит в [min_value, max_value] своего типа
2. Переполнение НЕ проверяется: результат сворачивается по модулю 2**bits
   (two's complement для signed). Исключений при overflow нет
3. + - * // % и унарные операции возвращают fixed-width тип
4. Один IntegralSpec → один класс (кэш make_integral)
"""

import logging
import operator
from functools import lru_cache
from typing import Any, Callable, ClassVar, Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.type_traits import CapabilityError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЙ
# =============================================================================

# Допустимые ширины fixed-width типов (бит)
SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)

# Ширина IntMax (аналог std::intmax_t)
INTMAX_BITS: Final[int] = 64


# =============================================================================
# INTEGRAL SPEC
# =============================================================================


class IntegralSpec(BaseModel):
    """
    Описание fixed-width целочисленного типа.

    Immutable модель (frozen=True): используется как ключ кэша make_integral.
    """

    bits: int = Field(..., gt=0, description="Ширина представления в битах")
    signed: bool = Field(True, description="Знаковый (two's complement) или беззнаковый")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_supported_width(cls, v: int) -> int:
        """Ширина должна быть одной из SUPPORTED_WIDTHS."""
        if v not in SUPPORTED_WIDTHS:
            raise ValueError(f"bits must be one of {SUPPORTED_WIDTHS}, got {v}")
        return v

    @property
    def name(self) -> str:
        return f"{'Int' if self.signed else 'UInt'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


# =============================================================================
# COMMON TYPE
# =============================================================================


def common_type(left: type, right: type) -> type:
    """
    Тип, к которому приводятся операнды типов left и right.

    Правила:
        - одинаковые типы → этот тип
        - два fixed-width → более широкий; при равной ширине → беззнаковый
        - fixed-width и plain int → fixed-width
        - один тип подкласс другого → базовый

    Raises:
        CapabilityError: Если общего типа нет

    Examples:
        >>> common_type(Int16, Int32).__name__
        'Int32'
        >>> common_type(Int32, UInt32).__name__
        'UInt32'
        >>> common_type(int, Int8).__name__
        'Int8'
    """
    if left is right:
        return left

    left_fixed = issubclass(left, FixedWidthInteger)
    right_fixed = issubclass(right, FixedWidthInteger)

    if left_fixed and right_fixed:
        if left.bits != right.bits:
            return left if left.bits > right.bits else right
        return right if left.signed else left

    if left_fixed and issubclass(right, int):
        return left
    if right_fixed and issubclass(left, int):
        return right

    if issubclass(left, right):
        return right
    if issubclass(right, left):
        return left

    raise CapabilityError(
        f"no common type for {left.__qualname__!r} and {right.__qualname__!r}"
    )


# =============================================================================
# FIXED-WIDTH INTEGER
# =============================================================================


def _binary(op: Callable[[int, int], int], reflected: bool = False) -> Callable[..., Any]:
    def method(self: "FixedWidthInteger", other: Any) -> Any:
        result_type = self._result_type(other)
        if result_type is None:
            return NotImplemented
        if reflected:
            return result_type(op(int(other), int(self)))
        return result_type(op(int(self), int(other)))

    method.__name__ = f"__{'r' if reflected else ''}{op.__name__.strip('_')}__"
    return method


class FixedWidthInteger(int):
    """
    Базовый класс fixed-width целых.

    Подклассы создаются make_integral и несут bits/signed. Конструктор
    сворачивает значение в диапазон типа; арифметика делает то же самое
    с результатом. Деление и остаток следуют семантике Python (floor).
    """

    __slots__ = ()

    bits: ClassVar[int]
    signed: ClassVar[bool]
    min_value: ClassVar[int]
    max_value: ClassVar[int]

    def __new__(cls, value: Any = 0) -> "FixedWidthInteger":
        if cls is FixedWidthInteger:
            raise TypeError("FixedWidthInteger is abstract; use make_integral()")
        return super().__new__(cls, cls.wrap(int(value)))

    @classmethod
    def wrap(cls, value: int) -> int:
        """Свернуть произвольный int в диапазон типа (mod 2**bits)."""
        value &= (1 << cls.bits) - 1
        if cls.signed and value > cls.max_value:
            value -= 1 << cls.bits
        return value

    def _result_type(self, other: Any) -> Optional[type]:
        if isinstance(other, FixedWidthInteger):
            return common_type(type(self), type(other))
        if isinstance(other, int):
            return type(self)
        return None

    __add__ = _binary(operator.add)
    __radd__ = _binary(operator.add, reflected=True)
    __sub__ = _binary(operator.sub)
    __rsub__ = _binary(operator.sub, reflected=True)
    __mul__ = _binary(operator.mul)
    __rmul__ = _binary(operator.mul, reflected=True)
    __floordiv__ = _binary(operator.floordiv)
    __rfloordiv__ = _binary(operator.floordiv, reflected=True)
    __mod__ = _binary(operator.mod)
    __rmod__ = _binary(operator.mod, reflected=True)

    def __neg__(self) -> "FixedWidthInteger":
        return type(self)(-int(self))

    def __pos__(self) -> "FixedWidthInteger":
        return self

    def __abs__(self) -> "FixedWidthInteger":
        return type(self)(abs(int(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


@lru_cache(maxsize=None)
def make_integral(spec: IntegralSpec) -> type:
    """
    Создать (или взять из кэша) fixed-width тип по описанию.

    Args:
        spec: Валидированное описание ширины и знаковости

    Returns:
        Подкласс FixedWidthInteger с именем spec.name
    """
    tp = type(
        spec.name,
        (FixedWidthInteger,),
        {
            "__slots__": (),
            "__module__": __name__,
            "bits": spec.bits,
            "signed": spec.signed,
            "min_value": spec.min_value,
            "max_value": spec.max_value,
        },
    )
    logger.debug("created integral type %s [%d, %d]", spec.name, spec.min_value, spec.max_value)
    return tp


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ТИПЫ
# =============================================================================

Int8 = make_integral(IntegralSpec(bits=8))
Int16 = make_integral(IntegralSpec(bits=16))
Int32 = make_integral(IntegralSpec(bits=32))
Int64 = make_integral(IntegralSpec(bits=64))

UInt8 = make_integral(IntegralSpec(bits=8, signed=False))
UInt16 = make_integral(IntegralSpec(bits=16, signed=False))
UInt32 = make_integral(IntegralSpec(bits=32, signed=False))
UInt64 = make_integral(IntegralSpec(bits=64, signed=False))

IntMax = make_integral(IntegralSpec(bits=INTMAX_BITS))
UIntMax = make_integral(IntegralSpec(bits=INTMAX_BITS, signed=False))
