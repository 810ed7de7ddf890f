from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .config import VERSION
from .formatter import format_number, format_polynomial, format_unicode
from .logging_config import get_logger, setup_logging
from .parser import parse_polynomial
from .polynomial import Polynomial
from .sympy_bridge import to_latex
from .types import (
    CoefficientOverflowError,
    DivisionByZeroError,
    ParseError,
    ValidationError,
)

logger = get_logger("cli")

UNARY_OPERATIONS = ("show", "deriv", "integ", "definite", "eval")
BINARY_OPERATIONS = ("add", "sub", "mul", "div")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Polycalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    p1 = parse_polynomial("3x^2 + 2x")
    p2 = parse_polynomial("4x + 1")
    checks = [
        ("Parsing", str(p1), "3x^2+2x"),
        ("Addition", str(p1 + p2), "3x^2+6x+1"),
        ("Multiplication", str(p1 * p2), "12x^3+11x^2+2x"),
        ("Derivative", str(p1.derivative()), "6x+2"),
        ("Evaluation", p1.evaluate(2.0), 16.0),
    ]
    for name, actual, expected in checks:
        if actual == expected:
            print(f"[OK] {name} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {name}: expected {expected!r}, got {actual!r}")
            checks_failed += 1

    quotient, remainder = p1.divide(p2)
    if quotient * p2 + remainder == p1:
        print("[OK] Division works")
        checks_passed += 1
    else:
        print(f"[FAIL] Division: {quotient} rem {remainder}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check complete: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def _render(poly: Polynomial, output_format: str, precision: int | None) -> str:
    if output_format == "latex":
        return to_latex(poly)
    if output_format == "unicode":
        return format_unicode(poly, precision)
    return format_polynomial(poly, precision)


def run_operation(
    operation: str, polys: list[Polynomial], args: argparse.Namespace
) -> dict[str, Any]:
    """Apply ``operation`` to parsed polynomials and return a result dict."""
    fmt, precision = args.format, args.precision
    first = polys[0]
    if operation == "show":
        result = first
    elif operation == "add":
        result = first + polys[1]
    elif operation == "sub":
        result = first - polys[1]
    elif operation == "mul":
        result = first * polys[1]
    elif operation == "deriv":
        result = first.derivative(args.order)
    elif operation == "integ":
        result = first.integrate()
    elif operation == "div":
        quotient, remainder = first.divide(polys[1])
        return {
            "ok": True,
            "type": "division",
            "quotient": _render(quotient, fmt, precision),
            "remainder": _render(remainder, fmt, precision),
        }
    elif operation == "eval":
        return {"ok": True, "type": "value", "value": first.evaluate(args.at)}
    elif operation == "definite":
        value = first.definite_integral(args.lower, args.upper)
        return {"ok": True, "type": "value", "value": value}
    else:
        raise ValueError(f"Unknown operation: {operation}")
    return {
        "ok": True,
        "type": "polynomial",
        "result": _render(result, fmt, precision),
    }


def print_result_pretty(
    res: dict[str, Any], output_format: str = "human", precision: int | None = None
) -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, anything else for text
        precision: Significant digits for numeric values
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    typ = res.get("type")
    if typ == "division":
        print("Quotient:", res["quotient"])
        print("Remainder:", res["remainder"])
    elif typ == "value":
        print(format_number(res["value"], precision))
    else:
        print(res["result"])


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Polycalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="polycalc", description="Single-variable polynomial calculator"
    )
    parser.add_argument(
        "operation",
        nargs="?",
        choices=UNARY_OPERATIONS + BINARY_OPERATIONS,
        help="Operation to apply",
    )
    parser.add_argument(
        "polynomials",
        nargs="*",
        help=(
            "Polynomial(s) in x, e.g. 3x^2+2x "
            "(write a leading minus with spaces: ' -x^2 + 1')"
        ),
    )
    parser.add_argument("--at", type=float, default=0.0, help="Point for 'eval'")
    parser.add_argument(
        "--order", type=int, default=1, help="Derivative order for 'deriv'"
    )
    parser.add_argument(
        "--lower", type=float, default=0.0, help="Lower bound for 'definite'"
    )
    parser.add_argument(
        "--upper", type=float, default=1.0, help="Upper bound for 'definite'"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unrecognised input instead of skipping it",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["human", "unicode", "latex", "json"],
        default="human",
        help="Output format",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.operation is None:
        parser.print_help()
        return 2

    expected = 2 if args.operation in BINARY_OPERATIONS else 1
    if len(args.polynomials) != expected:
        parser.error(
            f"'{args.operation}' takes {expected} polynomial(s), "
            f"got {len(args.polynomials)}"
        )

    # JSON output uses the canonical text, not LaTeX/Unicode renderings
    text_format = "human" if args.format == "json" else args.format
    run_args = argparse.Namespace(**{**vars(args), "format": text_format})
    try:
        strict = True if args.strict else None
        polys = [parse_polynomial(text, strict=strict) for text in args.polynomials]
        res = run_operation(args.operation, polys, run_args)
    except (
        ValidationError,
        ParseError,
        DivisionByZeroError,
        CoefficientOverflowError,
    ) as e:
        logger.info("Operation %s failed: %s", args.operation, e)
        res = {"ok": False, "error": str(e), "error_code": e.code}
    print_result_pretty(res, args.format, args.precision)
    return 0 if res.get("ok") else 1


if __name__ == "__main__":
    sys.exit(main_entry())
