"""
Errors — Иерархия исключений mlkit

Все функции библиотеки валидируют входы на входе в функцию и сообщают
о проблеме исключением. Частичные результаты никогда не возвращаются.

Таксономия:
- InputShapeError: неверный тип, арность или длина аргумента
  (например, длины t и weights в random_choice не совпадают)
- DegenerateInputError: численно вырожденный вход, который привёл бы
  к бесконечному циклу или делению на ноль (di ≤ 0 в make_range, n = 0 в subdivide)

Оба класса наследуют ValueError, поэтому код, ожидающий ValueError
от невалидного аргумента, продолжает работать.
"""


class MLError(Exception):
    """Базовое исключение mlkit."""

    pass


class InputShapeError(MLError, ValueError):
    """
    Аргумент имеет неверную форму: тип, арность или длину.

    Примеры: weights другой длины, чем t; нецелое значение для euler_phi;
    структурная спецификация индекса из 0 или более чем 3 элементов.
    """

    pass


class DegenerateInputError(MLError, ValueError):
    """
    Численно вырожденный вход без определённого результата.

    Примеры: шаг make_range, не двигающий imin к imax; n ≤ 0 в partition
    и subdivide; пустой t2 в riffle; нулевой суммарный вес.
    """

    pass
