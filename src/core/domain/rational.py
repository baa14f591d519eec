"""
Rational — Рациональное число над fixed-width представлением

Value object: пара (numerator, denominator) одного типа представления Rep.
BasicRational[Rep] — специализация по типу представления,
Rational = BasicRational[IntMax].

Операции:
- reduce: деление на gcd(numerator, denominator) БЕЗ нормализации знака
- common: приведение к знаменателю, общему с другим числом (асимметрично)
- expand: умножение обоих полей на ненулевой множитель
- '+': сложение через common; результат НЕ сокращается

Каждое преобразование есть в двух формах:
- reduce() / common() / expand() — возвращают новое значение
- reduce_in_place() / common_in_place() / expand_in_place() — мутируют
  получатель и возвращают его же

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 после конструирования (RationalDomainError)
2. Поля хранятся как переданы: (9, -5) остаётся (9, -5)
3. reduce сохраняет знаки полей по отдельности: (12, -8) → (3, -2)
4. Переполнение Rep не проверяется (wraparound)
5. Экземпляр мутабелен и не защищён блокировкой: общий экземпляр
   требует внешней синхронизации
"""

import logging
import numbers
from functools import lru_cache
from typing import Any, ClassVar, Final, Optional

from src.core.math.integral import IntMax, common_type
from src.core.math.numeric import gcd, lcm
from src.core.math.type_traits import CapabilityError, is_convertible, require_integral

logger = logging.getLogger(__name__)

# Знаменатель по умолчанию для Rational(n)
DEFAULT_DENOMINATOR: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalDomainError(ValueError):
    """
    Попытка создать невалидное состояние рационального числа.

    Поднимается при:
    1. Нулевом знаменателе в конструкторе (в том числе после свёртки в Rep)
    2. Расширении (expand) на 0 или с переполнением знаменателя в 0
    """

    pass


# =============================================================================
# BASIC RATIONAL
# =============================================================================


@lru_cache(maxsize=None)
def _specialize(base: type, rep: type) -> type:
    require_integral(rep)

    name = f"{base.__name__}[{rep.__name__}]"
    specialized = type(
        name,
        (base,),
        {"__slots__": (), "__module__": __name__, "__qualname__": name, "rep": rep},
    )
    logger.debug("created rational specialization %s", name)
    return specialized


def _require_integral_value(value: Any, name: str) -> None:
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integral value, got {type(value).__name__}")


class BasicRational:
    """
    Рациональное число над типом представления rep.

    Специализация: BasicRational[Int32](3, 7). Неспециализированный
    BasicRational не инстанцируется.

    Examples:
        >>> r = Rational(12, -8).reduce()
        >>> (int(r.numerator), int(r.denominator))
        (3, -2)
    """

    __slots__ = ("_numerator", "_denominator")

    rep: ClassVar[Optional[type]] = None

    def __class_getitem__(cls, rep: type) -> type:
        if cls.rep is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        return _specialize(cls, rep)

    def __init__(self, numerator: Any = 0, denominator: Optional[Any] = None) -> None:
        """
        Args:
            numerator: Числитель или BasicRational-источник для копии/конверсии
            denominator: Знаменатель (default: DEFAULT_DENOMINATOR)

        Raises:
            RationalDomainError: Если denominator == 0
            CapabilityError: Если тип не специализирован
            TypeError: Если аргументы не целочисленные
        """
        rep = type(self).rep
        if rep is None:
            raise CapabilityError(
                "BasicRational must be specialized with a representation type, "
                "e.g. BasicRational[Int32]"
            )

        if isinstance(numerator, BasicRational):
            if denominator is not None:
                raise TypeError("denominator cannot be combined with a rational source")
            self._copy_from(numerator)
            return

        if denominator is None:
            denominator = DEFAULT_DENOMINATOR

        _require_integral_value(numerator, "numerator")
        _require_integral_value(denominator, "denominator")

        # Проверяется значение ПОСЛЕ свёртки в Rep: 256 в Int8 → 0
        converted = rep(denominator)
        if not converted:
            raise RationalDomainError("denominator must not be 0")

        self._numerator = rep(numerator)
        self._denominator = converted

    def _copy_from(self, other: "BasicRational") -> None:
        rep = type(self).rep

        if type(other) is type(self):
            self._numerator = other._numerator
            self._denominator = other._denominator
            return

        if not is_convertible(other.rep, rep):
            raise CapabilityError(
                f"incompatible types in conversion: {other.rep.__name__} -> {rep.__name__}"
            )

        # Сужение сворачивается по модулю и не перепроверяется
        self._numerator = rep(other._numerator)
        self._denominator = rep(other._denominator)

    def _require_same_specialization(self, other: Any, operation: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{operation} requires {type(self).__name__}, got {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> Any:
        return self._numerator

    @property
    def denominator(self) -> Any:
        return self._denominator

    # -------------------------------------------------------------------------
    # Reduction
    # -------------------------------------------------------------------------

    def reduce(self) -> "BasicRational":
        """Новое значение, сокращённое на gcd(numerator, denominator)."""
        divisor = gcd(self._numerator, self._denominator)
        return type(self)(self._numerator // divisor, self._denominator // divisor)

    def reduce_in_place(self) -> "BasicRational":
        """Сократить текущее значение; возвращает self."""
        rep = type(self).rep
        divisor = gcd(self._numerator, self._denominator)
        self._numerator = rep(self._numerator // divisor)
        self._denominator = rep(self._denominator // divisor)
        return self

    # -------------------------------------------------------------------------
    # Common denominator
    # -------------------------------------------------------------------------

    def _common_factor(self, other: "BasicRational") -> Any:
        self._require_same_specialization(other, "common")
        return lcm(self._denominator, other._denominator) // self._denominator

    def common(self, other: "BasicRational") -> "BasicRational":
        """
        Новое значение, расширенное до знаменателя, общего с other.

        other не изменяется. Для выравнивания обоих операндов common
        вызывается дважды: a.common(b) и b.common(a).
        """
        factor = self._common_factor(other)
        return type(self)(self._numerator * factor, self._denominator * factor)

    def common_in_place(self, other: "BasicRational") -> "BasicRational":
        """Расширить текущее значение до знаменателя, общего с other."""
        rep = type(self).rep
        factor = self._common_factor(other)
        self._numerator = rep(self._numerator * factor)
        self._denominator = rep(self._denominator * factor)
        return self

    # -------------------------------------------------------------------------
    # Expansion
    # -------------------------------------------------------------------------

    def expand(self, factor: Any) -> "BasicRational":
        """
        Новое значение, расширенное множителем factor.

        Raises:
            RationalDomainError: Если factor == 0 или если произведение
                знаменателя на factor переполняет Rep и сворачивается в 0
        """
        _require_integral_value(factor, "factor")
        if not factor:
            raise RationalDomainError("expansion by 0 would result in an undefined value")

        rep = type(self).rep
        denominator = rep(self._denominator * factor)
        if not denominator:
            raise RationalDomainError(
                f"expansion by {int(factor)} overflows the denominator to 0 in {rep.__name__}"
            )

        return type(self)(self._numerator * factor, denominator)

    def expand_in_place(self, factor: Any) -> "BasicRational":
        """
        Расширить текущее значение множителем factor; возвращает self.

        Raises:
            RationalDomainError: Если factor == 0
        """
        _require_integral_value(factor, "factor")
        if not factor:
            raise RationalDomainError("expansion by 0 would result in an undefined value")

        rep = type(self).rep
        self._numerator = rep(self._numerator * factor)
        self._denominator = rep(self._denominator * factor)
        return self

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BasicRational":
        if type(other) is not type(self):
            return NotImplemented

        left = self.common(other)
        right = other.common(self)

        # left.denominator == right.denominator по построению common
        return type(self)(left._numerator + right._numerator, left._denominator)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(self._numerator)

    def __float__(self) -> float:
        # int / int округляется корректно, без промежуточной потери точности
        return int(self._numerator) / int(self._denominator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self._numerator)}, {int(self._denominator)})"


@gcd.register
def _gcd_rational(lhs: BasicRational, rhs: Any) -> BasicRational:
    """
    НОД двух рациональных чисел: gcd числителей / lcm знаменателей.

    Результат не сокращается и не нормализуется.
    """
    if not isinstance(rhs, BasicRational):
        raise TypeError(f"gcd of a rational requires a rational, got {type(rhs).__name__}")

    target = BasicRational[common_type(lhs.rep, rhs.rep)]
    return target(gcd(lhs.numerator, rhs.numerator), lcm(lhs.denominator, rhs.denominator))


# Аналог std::intmax_t-специализации
Rational = BasicRational[IntMax]
