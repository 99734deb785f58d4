# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
import re
import sys

from numkit.runtime import CFG

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


class UserInputError(Exception):
    pass


def strip_ansi(s: str) -> str:
    return _ANSI_RE.sub("", s)


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles negative n."""
    n = abs(n)
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2))
    est = (n.bit_length() * 30103) // 100000
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        p10 *= 10
        while n >= p10:
            est += 1
            p10 *= 10
    return est + 1


def digit_limit() -> int:
    return int(CFG("BEHAVIOUR.MAX_DIGITS", 100_000))


def _too_many_digits(label: str, limit: int) -> UserInputError:
    return UserInputError(
        f"{label} has more than {limit} decimal digits. "
        "Increase BEHAVIOUR.MAX_DIGITS in the profile or pass a smaller value."
    )


def check_digit_limit(n: int, label: str = "result") -> None:
    """Raise UserInputError when n has more decimal digits than the profile allows."""
    limit = digit_limit()
    if dec_digits(n) > limit:
        raise _too_many_digits(label, limit)


def parse_int(text: str, label: str = "value") -> int:
    """Parse a decimal integer typed by a user (underscores allowed)."""
    limit = digit_limit()
    s = text.strip().replace("_", "")
    if len(s.lstrip("+-")) > limit:
        raise _too_many_digits(label, limit)
    set_int_digit_limit(limit)
    try:
        return int(s, 10)
    except ValueError:
        raise UserInputError(f"Invalid input: {label} must be an integer, got {text!r}.") from None


def validate_output_setting(output_file: str | None) -> str | None:
    """
    Validate output setting.
    - None / "" => ok (screen only)
    - path/to/file => must not use a forbidden extension or device name
    Returns the output_file unchanged, or raises ValueError.
    """
    FORBIDDEN_FILENAMES = {
        "con", "prn", "aux", "nul",
        "com1", "com2", "com3", "com4", "com5", "com6", "com7", "com8", "com9",
        "lpt1", "lpt2", "lpt3", "lpt4", "lpt5", "lpt6", "lpt7", "lpt8", "lpt9",
    }
    FORBIDDEN_EXTENSIONS = {".py", ".md", ".toml"}

    if not output_file:
        return output_file

    if output_file.endswith(("/", "\\")):
        raise ValueError("Output must be a file, not a directory")

    basename = os.path.basename(output_file)
    name_no_ext, ext = os.path.splitext(basename)
    if basename.lower() in FORBIDDEN_FILENAMES or name_no_ext.lower() in FORBIDDEN_FILENAMES:
        raise ValueError(f"Forbidden output filename: {basename}")
    if ext.lower() in FORBIDDEN_EXTENSIONS:
        raise ValueError(f"Forbidden output file extension: {ext.lower()}")

    return output_file


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out


def set_int_digit_limit(limit: int) -> None:
    """Raise Python's int<->str guard to the profile limit unless the user pinned it."""
    if os.environ.get("PYTHONINTMAXSTRDIGITS"):
        return
    setter = getattr(sys, "set_int_max_str_digits", None)
    if setter is not None:
        setter(max(limit, 640))
