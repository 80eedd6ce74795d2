"""
Errors — иерархия исключений BigInteger

Два вида отказов:
- BigIntegerOverflow: результат не помещается в объявленную capacity (в limbs)
- BigIntegerDivisionByZero: модуль делителя равен нулю (для / и %)

Оба отказа — ошибки программы или входных данных, а не транзиентные
состояния: retry не предусмотрен, исключения всегда доходят до вызывающего.
"""


class BigIntegerError(ArithmeticError):
    """Базовое исключение для всех отказов арифметики BigInteger."""

    pass


class BigIntegerOverflow(BigIntegerError, OverflowError):
    """
    Число limbs результата превышает capacity значения.

    Attributes:
        size: Число значимых limbs, которое получилось бы у результата
        capacity: Допустимый максимум limbs
        operation: Операция, на которой обнаружено переполнение
    """

    def __init__(self, size: int, capacity: int, operation: str = "construction"):
        self.size = size
        self.capacity = capacity
        self.operation = operation
        super().__init__(
            f"BigIntegerOverflow: {operation} needs {size} limbs, capacity is {capacity}"
        )


class BigIntegerDivisionByZero(BigIntegerError, ZeroDivisionError):
    """Делитель равен нулю (size == 1, limbs[0] == 0)."""

    def __init__(self, operation: str = "division"):
        self.operation = operation
        super().__init__(f"BigIntegerDivisionByZero: {operation} by zero")
