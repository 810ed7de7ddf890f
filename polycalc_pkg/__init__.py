"""Polycalc package: single-variable polynomial arithmetic, calculus, parsing and formatting."""

__all__ = [
    "config",
    "term",
    "polynomial",
    "parser",
    "formatter",
    "sympy_bridge",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "parse",
    "add",
    "subtract",
    "multiply",
    "divide",
    "diff",
    "integrate_expr",
    "definite_integral",
    "evaluate",
    "validate_expression",
]
