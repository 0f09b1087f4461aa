"""
CLI — вычисление выражений из командной строки

Без аргументов вычисляет встроенный набор примеров. В режиме --json каждая
строка вывода — JSON объект, соответствующий контракту calculation_result.

Exit code: 0 если все выражения вычислены, 1 если хотя бы одно с ошибкой.
"""

import argparse
import json
import logging
import math
from dataclasses import dataclass
from typing import Final, Sequence

from infixcalc import __version__
from infixcalc.contracts import validate_calculation_result
from infixcalc.core.calculator import CalculationResult, evaluate_expression

logger = logging.getLogger(__name__)

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SAMPLE_EXPRESSIONS: Final[tuple[str, ...]] = (
    "3+5",
    "7-3+4",
    "3*(3+11-4)/2",
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CliConfig:
    """Конфигурация CLI.

    precision — число знаков после запятой в текстовом выводе.
    """

    precision: int = 0
    json_output: bool = False
    log_level: str = "WARNING"
    sample_expressions: tuple[str, ...] = SAMPLE_EXPRESSIONS

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CliConfig":
        if args.debug:
            log_level = "DEBUG"
        elif args.verbose:
            log_level = "INFO"
        else:
            log_level = "WARNING"
        return cls(
            precision=args.precision,
            json_output=args.json,
            log_level=log_level,
        )


# =============================================================================
# OUTPUT
# =============================================================================


def format_text(result: CalculationResult, precision: int = 0) -> str:
    """Текстовый блок для одного результата."""
    if result.error is not None:
        return f"Error: {result.error.message}"
    return f'Input: "{result.expression}"\nOutput: {result.value:.{precision}f}\n'


def json_value(value: float | None) -> float | str | None:
    """
    Значение для строгого JSON: inf/-inf/nan записываются строками.

    Examples:
        >>> json_value(2.5)
        2.5
        >>> json_value(float("-inf"))
        '-inf'
    """
    if value is None or math.isfinite(value):
        return value
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def format_json(result: CalculationResult) -> str:
    """
    JSON строка для одного результата, проверенная по контракту.

    Вывод — строгий JSON (без Infinity/NaN литералов).
    """
    payload = result.model_dump(mode="python")
    payload["value"] = json_value(result.value)
    validate_calculation_result(payload)
    return json.dumps(payload, allow_nan=False)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infixcalc",
        description="Вычисление инфиксных арифметических выражений (+ - * /, скобки)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Примеры:
  infixcalc "2 * (3 + 4 * 5) - 6"
  infixcalc "7 / 3.5" --precision 2
  infixcalc "1+2" "(1+2" --json
''',
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="выражения для вычисления (по умолчанию — встроенные примеры)",
    )
    parser.add_argument("--json", action="store_true", help="вывод в формате JSON (по строке на выражение)")
    parser.add_argument("--precision", type=int, default=0, help="знаков после запятой (default: 0)")
    parser.add_argument("-v", "--verbose", action="store_true", help="логирование уровня INFO")
    parser.add_argument("--debug", action="store_true", help="логирование уровня DEBUG")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(expressions: Sequence[str], config: CliConfig) -> int:
    """
    Вычисление и печать результатов.

    Returns:
        Exit code (0 — все успешно, 1 — была ошибка)
    """
    exit_code = 0

    for expression in expressions:
        result = evaluate_expression(expression)
        logger.debug(f"tokens={result.tokens} postfix={result.postfix}")

        if result.error is not None:
            logger.info(f"Failed to evaluate {expression!r}: {result.error.kind}")
            exit_code = 1

        if config.json_output:
            print(format_json(result))
        else:
            print(format_text(result, config.precision))

    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CliConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    expressions = args.expressions or list(config.sample_expressions)
    logger.info(f"Evaluating {len(expressions)} expression(s)")
    return run(expressions, config)


if __name__ == "__main__":
    raise SystemExit(main())
