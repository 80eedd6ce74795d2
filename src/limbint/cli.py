"""
CLI — командная строка limbint

Команды:
- eval: вычисление одного выражения A OP B
- stream: вычисление троек A OP B из stdin, по строке результата на тройку
- parse: разбор десятичного значения, вывод limbs или JSON-контракта

Ошибки домена (BigIntegerOverflow, BigIntegerDivisionByZero) и ошибки
разбора печатаются в stderr, код возврата 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import operator
import sys
from typing import Callable, TextIO

from limbint.core.domain.big_integer import BigInteger
from limbint.core.errors import BigIntegerError
from limbint.core.math.limbs import DEFAULT_CAPACITY
from limbint.io.streams import read_token, write_big_integer

logger = logging.getLogger(__name__)


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================

ARITHMETIC_OPERATORS: dict[str, Callable[[BigInteger, BigInteger], BigInteger]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": operator.mod,
}

COMPARISON_OPERATORS: dict[str, Callable[[BigInteger, BigInteger], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}

ALL_OPERATORS = sorted(ARITHMETIC_OPERATORS) + sorted(COMPARISON_OPERATORS)


def evaluate(left: str, op: str, right: str, capacity: int) -> str:
    """
    Вычисление left op right.

    Returns:
        Десятичный результат либо "true"/"false" для сравнений

    Raises:
        ValueError: неизвестный оператор или некорректный операнд
        BigIntegerError: переполнение или деление на ноль
    """
    a = BigInteger(left, capacity=capacity)
    b = BigInteger(right, capacity=capacity)

    if op in ARITHMETIC_OPERATORS:
        return str(ARITHMETIC_OPERATORS[op](a, b))
    if op in COMPARISON_OPERATORS:
        return "true" if COMPARISON_OPERATORS[op](a, b) else "false"
    raise ValueError(f"unknown operator {op!r}, expected one of {' '.join(ALL_OPERATORS)}")


# =============================================================================
# КОМАНДЫ
# =============================================================================


def cmd_eval(args: argparse.Namespace) -> int:
    try:
        print(evaluate(args.left, args.op, args.right, args.capacity))
    except (BigIntegerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run_stream(source: TextIO, sink: TextIO, capacity: int) -> int:
    """
    Вычисление троек A OP B из source.

    Первая ошибка останавливает обработку: результаты до неё уже
    записаны в sink, сама ошибка уходит в stderr.
    """
    evaluated = 0
    while (left := read_token(source)) is not None:
        op = read_token(source)
        right = read_token(source)
        if op is None or right is None:
            print("Error: incomplete expression at end of input", file=sys.stderr)
            return 1
        try:
            result = evaluate(left, op, right, capacity)
        except (BigIntegerError, ValueError) as e:
            print(f"Error: {left} {op} {right}: {e}", file=sys.stderr)
            return 1
        sink.write(result + "\n")
        evaluated += 1

    logger.info("evaluated %d expressions", evaluated)
    return 0


def cmd_stream(args: argparse.Namespace) -> int:
    return run_stream(sys.stdin, sys.stdout, args.capacity)


def cmd_parse(args: argparse.Namespace) -> int:
    """Разбор значения: каноническая форма и limbs, либо JSON-контракт (--json)."""
    try:
        value = BigInteger(args.value, capacity=args.capacity)
    except (BigIntegerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(value.to_json()))
        return 0

    write_big_integer(sys.stdout, value, end="\n")
    print(f"  sign:  {'-' if value.is_negative() else '+'}")
    print(f"  size:  {value.size} / {value.capacity} limbs")
    print(f"  limbs: {list(value.limbs)}")
    return 0


# =============================================================================
# ПАРСЕР АРГУМЕНТОВ
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="limbint",
        description="Fixed-capacity base-10000 big integer calculator",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    capacity_parent = argparse.ArgumentParser(add_help=False)
    capacity_parent.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help=f"Capacity in limbs of 4 decimal digits (default: {DEFAULT_CAPACITY})",
    )

    eval_parser = subparsers.add_parser(
        "eval", parents=[capacity_parent], help="Evaluate A OP B"
    )
    eval_parser.add_argument("left", help="Left operand (decimal)")
    eval_parser.add_argument("op", choices=ALL_OPERATORS, help="Operator")
    eval_parser.add_argument("right", help="Right operand (decimal)")
    eval_parser.set_defaults(func=cmd_eval)

    stream_parser = subparsers.add_parser(
        "stream",
        parents=[capacity_parent],
        help="Evaluate whitespace-separated A OP B triples from stdin",
    )
    stream_parser.set_defaults(func=cmd_stream)

    parse_parser = subparsers.add_parser(
        "parse", parents=[capacity_parent], help="Show the limb layout of a value"
    )
    parse_parser.add_argument("value", help="Decimal value")
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validated big_integer_state JSON document",
    )
    parse_parser.set_defaults(func=cmd_parse)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Точка входа: разбор аргументов, настройка logging, запуск команды."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
