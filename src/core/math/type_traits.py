"""
Type Traits — Capability Predicates для generic numeric кода

Модуль отвечает на статические вопросы о типе представления:
- is_negatable: поддерживает ли тип унарный минус с результатом того же типа
- is_lessthan_comparable: возвращает ли '<' ровно bool
- is_integral / is_signed / is_convertible: классификация представлений

Вердикт вычисляется один раз на тип и кэшируется. Проверка выполняется
на первой операции (absolute, gcd, BasicRational[Rep]), а не внутри
арифметики.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Предикаты детерминированы: один тип → один вердикт на весь процесс
2. Нарушение capability → CapabilityError (TypeError) до начала вычислений
3. bool не является ни negatable, ни integral представлением
"""

import logging
import numbers
import typing
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Final, Optional

logger = logging.getLogger(__name__)

# Встроенные знаковые типы, не зарегистрированные как numbers.Real
_EXTRA_SIGNED_TYPES: Final[tuple[type, ...]] = (Decimal,)

_MISSING: Final[object] = object()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapabilityError(TypeError):
    """
    Тип представления не обладает требуемой capability.

    Аналог ошибки инстанцирования шаблона: поднимается на первой операции,
    получившей неподходящий тип, а не в глубине арифметики.
    """

    pass


# =============================================================================
# PROBING
# =============================================================================


def _sample_instance(tp: type) -> Any:
    """Default-constructed экземпляр tp или _MISSING, если tp() невозможен."""
    try:
        return tp()
    except Exception:
        return _MISSING


def _return_annotation(tp: type, method_name: str) -> Any:
    method = getattr(tp, method_name, None)
    if method is None:
        return _MISSING
    try:
        hints = typing.get_type_hints(method)
    except (NameError, TypeError, AttributeError):
        return _MISSING
    return hints.get("return", _MISSING)


def _annotation_matches(annotation: Any, tp: type) -> bool:
    if annotation is tp:
        return True
    if annotation is getattr(typing, "Self", _MISSING):
        return True
    # TypeVar, bound к самому классу (def __neg__(self: T) -> T)
    return isinstance(annotation, typing.TypeVar)


# =============================================================================
# CAPABILITY PREDICATES
# =============================================================================


@lru_cache(maxsize=None)
def is_negatable(tp: type) -> bool:
    """
    Поддерживает ли tp унарный '-' с результатом типа tp.

    Алгоритм:
        1. Нет __neg__ → False
        2. Есть default-экземпляр → type(-sample) is tp
        3. Иначе → return-аннотация __neg__ совпадает с tp

    Examples:
        >>> is_negatable(int)
        True
        >>> is_negatable(bool)  # -True → int
        False
        >>> is_negatable(str)
        False
    """
    verdict = False

    if getattr(tp, "__neg__", None) is not None:
        sample = _sample_instance(tp)
        if sample is not _MISSING:
            try:
                verdict = type(-sample) is tp
            except TypeError:
                verdict = False
        else:
            verdict = _annotation_matches(_return_annotation(tp, "__neg__"), tp)

    logger.debug("capability verdict: is_negatable(%s) = %s", tp.__qualname__, verdict)
    return verdict


@lru_cache(maxsize=None)
def is_lessthan_comparable(tp: type) -> bool:
    """
    Возвращает ли 'a < b' для a, b типа tp ровно bool.

    object определяет __lt__ (NotImplemented), поэтому наличие метода
    ничего не доказывает: решает probing или аннотация.
    """
    verdict = False

    sample = _sample_instance(tp)
    if sample is not _MISSING:
        try:
            verdict = type(sample < sample) is bool
        except TypeError:
            verdict = False
    else:
        verdict = _return_annotation(tp, "__lt__") is bool

    logger.debug(
        "capability verdict: is_lessthan_comparable(%s) = %s", tp.__qualname__, verdict
    )
    return verdict


def is_integral(tp: type) -> bool:
    """Целочисленный тип представления (bool исключён)."""
    return isinstance(tp, type) and issubclass(tp, numbers.Integral) and not issubclass(tp, bool)


def is_signed(tp: type) -> bool:
    """
    Знаковый ли тип представления.

    Явный class-атрибут `signed` имеет приоритет (fixed-width типы).
    Пользовательские типы без него считаются беззнаковыми: для них
    absolute() не инвертирует знак, пока не зарегистрирован overload.
    """
    declared: Optional[bool] = getattr(tp, "signed", None)
    if isinstance(declared, bool):
        return declared

    if issubclass(tp, bool):
        return False

    return issubclass(tp, numbers.Real) or issubclass(tp, _EXTRA_SIGNED_TYPES)


def is_convertible(from_tp: type, to_tp: type) -> bool:
    """Допустимо ли неявное преобразование from_tp → to_tp."""
    if is_integral(from_tp) and is_integral(to_tp):
        return True
    return issubclass(from_tp, to_tp)


# =============================================================================
# GUARDS
# =============================================================================


def require_capabilities(tp: type, *predicates: Callable[[type], bool]) -> None:
    """
    Проверка, что tp удовлетворяет всем predicates.

    Raises:
        CapabilityError: с именем первого нарушенного предиката
    """
    for predicate in predicates:
        if not predicate(tp):
            raise CapabilityError(
                f"type {tp.__qualname__!r} does not satisfy {predicate.__name__}"
            )


def require_integral(tp: Any) -> None:
    """Проверка, что tp — целочисленный тип представления."""
    if not is_integral(tp):
        name = getattr(tp, "__qualname__", repr(tp))
        raise CapabilityError(f"representation type must be integral, got {name!r}")
