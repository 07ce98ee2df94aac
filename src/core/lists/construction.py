"""
Constructing Lists — Построение списков

Функции:
- make_range: {imin, ..., imax} с шагом di
- table: n вызовов генератора или значения expr(i) по итератору
- subdivide: n+1 равноотстоящих точек на [xmin, xmax]
- character_range: символы с кодами из [code(c1), code(c2)]
- fixed_point_list: итерации f до неподвижной точки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. make_range и table не зацикливаются: шаг, не двигающий значение (в т.ч. меньше точности float) → DegenerateInputError
2. Деление на ноль в subdivide невозможно (n ≤ 0 → DegenerateInputError)
3. Результат — всегда новый list
"""

import math
from collections.abc import Callable
from typing import Any, Final, Optional

from src.core.errors import DegenerateInputError, InputShapeError
from src.core.lists.specs import IterationSpec
from src.core.math.numerical_safeguards import (
    is_integer_value,
    validate_callable,
    validate_non_negative_int,
    validate_number,
    validate_positive_int,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Шаг make_range по умолчанию
DEFAULT_RANGE_STEP: Final[int] = 1

# Максимальный code point Unicode для character_range
MAX_CODE_POINT: Final[int] = 0x10FFFF


# =============================================================================
# RANGE / TABLE
# =============================================================================


def make_range(imin: float, imax: float, di: float = DEFAULT_RANGE_STEP) -> list[float]:
    """
    Список {imin, imin + di, ..., ≤ imax}.

    Значения накапливаются последовательным сложением (imin += di),
    поэтому для float-шага возможна накопленная ошибка округления.

    Args:
        imin: Начальное значение
        imax: Верхняя граница (включительно)
        di: Шаг (default: 1)

    Returns:
        Список значений; [] если imin > imax

    Raises:
        InputShapeError: Если аргументы не конечные числа
        DegenerateInputError: Если di ≤ 0 при imin ≤ imax (бесконечный цикл)
            или value + di == value (шаг меньше точности float)

    Examples:
        >>> make_range(1, 5)
        [1, 2, 3, 4, 5]
        >>> make_range(0, 1, 0.5)
        [0, 0.5, 1.0]
        >>> make_range(5, 1)
        []
    """
    validate_number(imin, "imin")
    validate_number(imax, "imax")
    validate_number(di, "di")

    if imin > imax:
        return []

    if di <= 0:
        raise DegenerateInputError(
            f"di must move imin toward imax: imin={imin}, imax={imax}, di={di}"
        )

    result = []
    value = imin
    while value <= imax:
        if value + di == value:
            raise DegenerateInputError(
                f"di={di} is below float resolution at {value}: range would not advance"
            )
        result.append(value)
        value += di
    return result


def table(expr: Callable[..., Any], n: Any) -> list[Any]:
    """
    Таблица значений генератора expr.

    - table(expr, n): n вызовов expr() без аргументов. expr всегда
      рассматривается как генератор; для n копий значения x используйте
      table(lambda: x, n).
    - table(expr, (imin, imax[, di])): [expr(i) ...] по итератору IterationSpec;
      imax входит в результат, если достижим шагом. di == 0 → [expr(imin)].

    Raises:
        InputShapeError: expr не callable, n не целое и не итератор
        DegenerateInputError: n < 0; шаг итератора меньше точности float

    Examples:
        >>> table(lambda: "x", 3)
        ['x', 'x', 'x']
        >>> table(lambda i: i * i, (1, 4))
        [1, 4, 9, 16]
        >>> table(lambda i: i, (10, 1, -3))
        [10, 7, 4, 1]
    """
    validate_callable(expr, "expr")

    if is_integer_value(n):
        count = validate_non_negative_int(n, "n")
        return [expr() for _ in range(count)]

    spec = IterationSpec.parse(n)
    return [expr(i) for i in spec.values()]


# =============================================================================
# SUBDIVIDE
# =============================================================================


def subdivide(xmin: float, xmax: float, n: int) -> list[float]:
    """
    Разбиение [xmin, xmax] на n равных частей: n + 1 точка.

    step = (xmax - xmin) / n; точка i равна xmin + i * step.

    Raises:
        InputShapeError: n не целое, границы не числа
        DegenerateInputError: n ≤ 0

    Examples:
        >>> subdivide(0, 10, 5)
        [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]
        >>> subdivide(0, 1, 4)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    validate_number(xmin, "xmin")
    validate_number(xmax, "xmax")
    parts = validate_positive_int(n, "n")

    step = (xmax - xmin) / parts
    return [xmin + i * step for i in range(parts + 1)]


# =============================================================================
# CHARACTER RANGE
# =============================================================================


def _character_code(c: Any, name: str) -> int:
    """Code point одиночного символа или валидированный целый код."""
    if isinstance(c, str):
        if len(c) != 1:
            raise InputShapeError(f"{name} must be a single character, got {c!r}")
        return ord(c)

    code = validate_non_negative_int(c, name)
    if code > MAX_CODE_POINT:
        raise InputShapeError(f"{name} exceeds max code point {MAX_CODE_POINT:#x}: {code}")
    return code


def character_range(c1: str | int, c2: str | int) -> list[str]:
    """
    Символы с кодами от code(c1) до code(c2) включительно.

    Границы — одиночные символы либо целые коды; смешивание допустимо.

    Examples:
        >>> character_range("a", "e")
        ['a', 'b', 'c', 'd', 'e']
        >>> character_range(48, 51)
        ['0', '1', '2', '3']
        >>> character_range("z", "a")
        []
    """
    start = _character_code(c1, "c1")
    stop = _character_code(c2, "c2")
    return [chr(code) for code in range(start, stop + 1)]


# =============================================================================
# FIXED POINT LIST
# =============================================================================


def fixed_point_list(
    f: Callable[[Any], Any],
    expr: Any,
    max_iterations: Optional[int] = None,
) -> list[Any]:
    """
    Результаты повторного применения f, начиная с expr, до неподвижной точки.

    Список заканчивается первым результатом, равным предыдущему
    (он входит в список), либо после max_iterations применений f.
    Сходимость не гарантирована: без max_iterations расходящийся f
    приводит к бесконечному циклу. В машинной точности сходимость
    может не наступить из-за осцилляции последнего бита.

    Args:
        f: Функция одного аргумента
        expr: Начальное значение
        max_iterations: Лимит применений f (None — без лимита)

    Returns:
        [expr, f(expr), f(f(expr)), ...]

    Raises:
        InputShapeError: f не callable или лимит не целый
        DegenerateInputError: max_iterations < 0

    Examples:
        >>> fixed_point_list(lambda x: x // 2, 20)
        [20, 10, 5, 2, 1, 0, 0]
        >>> fixed_point_list(lambda x: x + 1, 0, max_iterations=3)
        [0, 1, 2, 3]
    """
    validate_callable(f, "f")
    limit = math.inf if max_iterations is None else validate_non_negative_int(
        max_iterations, "max_iterations"
    )

    result = [expr]
    last = expr
    i = 1
    while i <= limit:
        new = f(last)
        result.append(new)
        if new == last:
            return result
        last = new
        i += 1
    return result
