"""Centralized configuration for Polycalc.

This module defines:
- The cancellation tolerance used for term elimination and equality
- Output precision for displayed coefficients
- Input validation limits
- Parsing mode (lenient or strict)
- Regex patterns for tokenizing polynomial text

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with POLYCALC_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("polycalc")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Coefficients with magnitude below this are treated as zero
EPSILON = float(os.getenv("POLYCALC_EPSILON", "1e-9"))

# Significant digits for displayed coefficients (unset = exact round-trip text)
_precision_env = os.getenv("POLYCALC_OUTPUT_PRECISION")
OUTPUT_PRECISION = int(_precision_env) if _precision_env else None

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("POLYCALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Strict parsing rejects unrecognised fragments instead of skipping them
STRICT_PARSING = os.getenv("POLYCALC_STRICT_PARSING", "false").lower() == "true"

WHITESPACE_REGEX = re.compile(r"\s+")

# [sign][coefficient][x[^exponent]]; a lone sign is only valid in front of x
TERM_REGEX = re.compile(
    r"(?P<coeff>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|[+-])?"
    r"(?P<var>x(?:\^(?P<exp>\d+))?)?"
)

SUPERSCRIPT_REGEX = re.compile(r"[⁰¹²³⁴⁵⁶⁷⁸⁹]+")
