"""
Specs — Модели структурных спецификаций индексов и итераторов

Immutable Pydantic модели для структурных аргументов из 1–3 чисел:
- IndexSpec: позиции для drop — {n}, {m, n}, {m, n, s}
- IterationSpec: итератор для table — {imin, imax}, {imin, imax, di}

Позиции 1-based.
"""

from typing import Any, Final, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.errors import DegenerateInputError, InputShapeError, MLError
from src.core.math.numerical_safeguards import is_integer_value, is_sequence, is_valid_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальная длина структурной спецификации индекса: {m, n, s}
MAX_INDEX_SPEC_LENGTH: Final[int] = 3

# Шаг итератора table по умолчанию
DEFAULT_ITERATION_STEP: Final[int] = 1


def _convert_validation_error(error: ValidationError, what: str) -> MLError:
    """
    Конверсия pydantic ValidationError в исключения mlkit.

    Отказ валидатора поля step (нулевой stride) — вырожденный вход,
    всё остальное — ошибка формы.
    """
    for detail in error.errors():
        if detail.get("loc") == ("step",) and detail.get("type") == "value_error":
            return DegenerateInputError(f"invalid {what}: {detail['msg']}")
    return InputShapeError(f"invalid {what}: {error}")


# =============================================================================
# INDEX SPEC (drop)
# =============================================================================


class IndexSpec(BaseModel):
    """
    Структурная спецификация позиций для drop.

    - start: первая позиция m (для формы {n} — единственная позиция)
    - stop: последняя позиция n (None для формы {n})
    - step: шаг s (None для форм {n} и {m, n})
    """

    start: int = Field(..., description="Первая исключаемая позиция (1-based)")
    stop: Optional[int] = Field(None, description="Последняя исключаемая позиция")
    step: Optional[int] = Field(None, description="Шаг внутри [start, stop]")

    model_config = {"frozen": True, "strict": True}

    @field_validator("step")
    @classmethod
    def validate_step_non_zero(cls, v: Optional[int]) -> Optional[int]:
        """Нулевой шаг делает (p - m) mod s неопределённым."""
        if v == 0:
            raise ValueError("step must be non-zero")
        return v

    @classmethod
    def parse(cls, value: Any) -> "IndexSpec":
        """
        Построение IndexSpec из list/tuple из 1–3 целых (или готового IndexSpec).

        Raises:
            InputShapeError: Неверная длина или нецелые элементы
            DegenerateInputError: Нулевой шаг
        """
        if isinstance(value, cls):
            return value

        if not is_sequence(value) or not 1 <= len(value) <= MAX_INDEX_SPEC_LENGTH:
            raise InputShapeError(
                f"index spec must hold 1 to {MAX_INDEX_SPEC_LENGTH} integers, got {value!r}"
            )
        if not all(is_integer_value(p) for p in value):
            raise InputShapeError(f"index spec entries must be integers, got {value!r}")

        fields = dict(zip(("start", "stop", "step"), (int(p) for p in value)))
        try:
            return cls(**fields)
        except ValidationError as e:
            raise _convert_validation_error(e, "index spec") from e

    def excludes(self, position: int) -> bool:
        """
        Попадает ли 1-based позиция в исключаемое множество.

        Examples:
            >>> IndexSpec(start=2, stop=6, step=2).excludes(4)
            True
            >>> IndexSpec(start=2, stop=6, step=2).excludes(5)
            False
        """
        if self.stop is None:
            return position == self.start
        if position < self.start or position > self.stop:
            return False
        if self.step is None:
            return True
        return (position - self.start) % self.step == 0


# =============================================================================
# ITERATION SPEC (table)
# =============================================================================


class IterationSpec(BaseModel):
    """
    Итератор {imin, imax, di} для table.

    di > 0 — счёт вверх пока i ≤ imax, di < 0 — вниз пока i ≥ imax,
    di == 0 — единственное значение imin.
    """

    imin: int | float = Field(..., description="Начальное значение")
    imax: int | float = Field(..., description="Конечное значение (включительно, если достижимо)")
    di: int | float = Field(DEFAULT_ITERATION_STEP, description="Шаг")

    model_config = {"frozen": True}

    @field_validator("imin", "imax", "di", mode="before")
    @classmethod
    def validate_finite(cls, v: Any) -> Any:
        """bool, NaN и Inf не являются допустимыми границами."""
        if not is_valid_float(v):
            raise ValueError(f"iteration bound must be a finite number, got {v!r}")
        return v

    @classmethod
    def parse(cls, value: Any) -> "IterationSpec":
        """
        Построение IterationSpec из list/tuple (imin, imax[, di]).

        Raises:
            InputShapeError: Неверная длина или нечисловые элементы
        """
        if isinstance(value, cls):
            return value

        if not is_sequence(value) or len(value) not in (2, 3):
            raise InputShapeError(
                f"iteration spec must be (imin, imax) or (imin, imax, di), got {value!r}"
            )

        fields = dict(zip(("imin", "imax", "di"), value))
        try:
            return cls(**fields)
        except ValidationError as e:
            raise _convert_validation_error(e, "iteration spec") from e

    def values(self) -> list[int | float]:
        """
        Значения итератора в порядке обхода.

        Raises:
            DegenerateInputError: Если i + di == i (шаг меньше точности float)

        Examples:
            >>> IterationSpec(imin=1, imax=5, di=2).values()
            [1, 3, 5]
            >>> IterationSpec(imin=3, imax=1, di=-1).values()
            [3, 2, 1]
            >>> IterationSpec(imin=4, imax=0, di=0).values()
            [4]
        """
        if self.di == 0:
            return [self.imin]

        result = []
        i = self.imin
        if self.di > 0:
            while i <= self.imax:
                self._check_advances(i)
                result.append(i)
                i += self.di
        else:
            while i >= self.imax:
                self._check_advances(i)
                result.append(i)
                i += self.di
        return result

    def _check_advances(self, i: int | float) -> None:
        """Ненулевой шаг, поглощённый округлением float, зациклил бы обход."""
        if i + self.di == i:
            raise DegenerateInputError(
                f"di={self.di} is below float resolution at {i}: iterator would not advance"
            )
