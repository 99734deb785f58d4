# src/numkit/cli.py

"""
numkit - modular combinatorics and integer helpers

Description:
    Binomial coefficients modulo a prime from precomputed factorial tables,
    modular powers, binary conversion, primality and power-of-two checks,
    and the shifted-scan solver for multi-test-case input.

usage: see numkit -h
"""

from __future__ import annotations

import argparse
import io
import sys
import textwrap
import time
from importlib.resources import files as pkg_files

from colorama import Fore, Style
from colorama import init as colorama_init

from numkit import __version__ as _ver
from numkit import config as CONFIG
from numkit.bits import from_binary, is_power_of_two, nearest_power_of_two, to_binary
from numkit.combinatorics import CombinatoricsError, ModularCombinatorics
from numkit.modular import power
from numkit.output_manager import OutputManager
from numkit.primes import is_prime
from numkit.runtime import APPLY, CFG, ensure_runtime_deps, reset
from numkit.runtime import current as _rt_current
from numkit.solver import solve_stream
from numkit.utility import (
    UserInputError,
    check_digit_limit,
    dec_digits,
    digit_limit,
    flatten_dotted,
    parse_int,
    set_int_digit_limit,
    typename,
    validate_output_setting,
)
from numkit.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _debug(msg: str) -> None:
    if _rt_current().debug:
        print(f"[debug] {msg}", file=sys.stderr)


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    examples:
      numkit ncr 10 3                     C(10, 3) mod the profile modulus
      numkit ncr 10 3 --modulus 998244353
      numkit pow 2 100 --modulus 0        plain 2**100
      numkit table 10                     factorials and inverses up to 10
      numkit solve input.txt              shifted scan over each test case
      numkit --profile ntt ncr 10 3       use (and remember) profile 'ntt'
    """)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--output", default=None, help="Append results to a file (also prints unless --quiet)")
    common.add_argument("--quiet", action="store_true", help="Do not print results to the screen")
    common.add_argument("--debug", action="store_true", help="Show profile, table and timing diagnostics")

    p = argparse.ArgumentParser(
        prog="numkit",
        description="numkit - modular combinatorics & integer helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    p.add_argument("--profile", default=None, help="Profile to use (remembered for later runs)")

    sub = p.add_subparsers(dest="command", metavar="command")
    sub.required = True

    for name, helptext in (("ncr", "binomial coefficient C(n, r) mod p"),
                           ("npr", "permutations P(n, r) mod p")):
        sp = sub.add_parser(name, parents=[common], help=helptext)
        sp.add_argument("n")
        sp.add_argument("r")
        sp.add_argument("--modulus", default=None, help="Prime modulus (default: profile COMBINATORICS.MODULUS)")
        sp.add_argument("--limit", default=None, help="Table size (default: n)")

    sp = sub.add_parser("pow", parents=[common], help="base^exp mod p (--modulus 0 for a plain power)")
    sp.add_argument("base")
    sp.add_argument("exp")
    sp.add_argument("--modulus", default=None, help="Modulus (default: profile COMBINATORICS.MODULUS)")

    sp = sub.add_parser("table", parents=[common], help="print i, i! and (i!)^-1 mod p for i = 0..n")
    sp.add_argument("n")
    sp.add_argument("--modulus", default=None, help="Prime modulus (default: profile COMBINATORICS.MODULUS)")

    sp = sub.add_parser("bin", parents=[common], help="binary digits of a non-negative integer")
    sp.add_argument("value")

    sp = sub.add_parser("int", parents=[common], help="integer value of a binary string")
    sp.add_argument("bits")

    sp = sub.add_parser("prime", parents=[common], help="primality test")
    sp.add_argument("n")

    sp = sub.add_parser("pow2", parents=[common], help="power-of-two test and the next power of two")
    sp.add_argument("n")

    sp = sub.add_parser("solve", parents=[common], help="run the shifted-scan solver on FILE or stdin")
    sp.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")

    sub.add_parser("profiles", parents=[common], help="list profiles")
    sp = sub.add_parser("init", parents=[common], help="create the workspace and copy packaged profiles")
    sp.add_argument("--overwrite", action="store_true", help="Replace existing profiles with the packaged ones")
    sub.add_parser("where", parents=[common], help="show the workspace and package paths")

    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except (UserInputError, CombinatoricsError) as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        if "--debug" in (argv if argv is not None else sys.argv) or _rt_current().debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- profile handling ----
def _select_profile_name(explicit: str | None) -> str:
    """
    Precedence:
      1) explicit --profile
      2) last used (from workspace)
      3) 'default'
    """
    if explicit:
        return explicit
    last = CONFIG.read_current_profile()
    if last and CONFIG.has_profile(last):
        return last
    return "default"


def _apply_profile(explicit: str | None, *, debug: bool = False) -> str:
    if explicit and not CONFIG.has_profile(explicit):
        raise UserInputError(
            f"Unknown profile: '{explicit}'. Available profiles: {', '.join(CONFIG.list_all_profiles())}"
        )

    profile_name = _select_profile_name(explicit)
    if not CONFIG.has_profile(profile_name):
        _debug(f"profile '{profile_name}' missing, running on built-in defaults")
        return profile_name

    selected = CONFIG.load_settings(profile_name)
    APPLY(selected)
    if debug:
        _rt_current().debug = True  # --debug wins over the profile
    if explicit:
        CONFIG.write_current_profile(explicit)

    if _rt_current().debug:
        _debug(f"active profile: {profile_name}")
        _debug(f"profile file: {selected._source}")
        flat = flatten_dotted(_rt_current().settings)
        for k in sorted(flat, key=str.lower):
            v = flat[k]
            print(f"        {k:.<40} {v!r} ({typename(v)})", file=sys.stderr)
    return profile_name


def _modulus_arg(text: str | None) -> int:
    return _rt_current().modulus if text is None else parse_int(text, "modulus")


def _build_tables(limit: int, modulus: int) -> ModularCombinatorics:
    t0 = time.perf_counter()
    comb = ModularCombinatorics(limit, modulus, check_prime=_rt_current().check_prime)
    _debug(f"tables: limit={limit} modulus={modulus} built in {(time.perf_counter() - t0) * 1000:.1f} ms")
    return comb


# ---- commands ----
def _cmd_choose(args, om: OutputManager) -> None:
    n = parse_int(args.n, "n")
    r = parse_int(args.r, "r")
    modulus = _modulus_arg(args.modulus)
    # one query per run: the table only has to reach n
    limit = max(n, 0) if args.limit is None else parse_int(args.limit, "limit")
    comb = _build_tables(limit, modulus)
    if args.command == "ncr":
        om.write(comb.ncr(n, r))
    else:
        om.write(comb.npr(n, r))


def _cmd_pow(args, om: OutputManager) -> None:
    base = parse_int(args.base, "base")
    exp = parse_int(args.exp, "exponent")
    modulus = _modulus_arg(args.modulus)
    if exp < 0:
        raise UserInputError("Invalid input: exponent must not be negative.")
    if modulus < 0:
        raise UserInputError("Invalid input: modulus must not be negative.")
    result = power(base, exp, modulus)
    _debug(f"result has {dec_digits(result)} decimal digit(s)")
    check_digit_limit(result)
    om.write(result)


def _cmd_table(args, om: OutputManager) -> None:
    n = parse_int(args.n, "n")
    comb = _build_tables(n, _modulus_arg(args.modulus))
    width = len(str(n))
    for i, (f, inv) in enumerate(zip(comb.fact, comb.inv_fact)):
        om.write(f"{i:>{width}}  {f}  {inv}")


def _cmd_bin(args, om: OutputManager) -> None:
    value = parse_int(args.value, "value")
    if value < 0:
        raise UserInputError("Invalid input: value must not be negative.")
    om.write(to_binary(value))


def _cmd_int(args, om: OutputManager) -> None:
    try:
        om.write(from_binary(args.bits.strip()))
    except ValueError as e:
        raise UserInputError(f"Invalid input: {e}.") from None


def _cmd_prime(args, om: OutputManager) -> None:
    n = parse_int(args.n, "n")
    verdict = f"{Fore.GREEN}prime{Style.RESET_ALL}" if is_prime(n) else f"{Fore.RED}not prime{Style.RESET_ALL}"
    om.write(f"{n} is {verdict}")


def _cmd_pow2(args, om: OutputManager) -> None:
    n = parse_int(args.n, "n")
    if is_power_of_two(n):
        om.write(f"{n} is a power of two")
    else:
        om.write(f"{n} is not a power of two; next power of two: {nearest_power_of_two(n)}")


def _cmd_solve(args, om: OutputManager) -> None:
    buf = io.StringIO()
    t0 = time.perf_counter()
    if args.file:
        try:
            with open(args.file, encoding="utf-8") as fh:
                cases = solve_stream(fh, buf)
        except FileNotFoundError:
            raise UserInputError(f"Input file not found: {args.file}") from None
    else:
        cases = solve_stream(sys.stdin, buf)
    _debug(f"solved {cases} case(s) in {(time.perf_counter() - t0) * 1000:.1f} ms")
    om.write(buf.getvalue(), end="")


def _cmd_profiles(args, om: OutputManager) -> None:
    active = _rt_current().profile_name
    for name, desc in CONFIG.list_profiles_with_descriptions():
        mark = f"{Fore.YELLOW}*{Style.RESET_ALL}" if name == active else " "
        om.write(f"{mark} {name:<16} {desc}")


def _cmd_init(args, om: OutputManager) -> None:
    ws, copied = seed_workspace(overwrite=args.overwrite)
    suffix = " (overwrote existing files)" if args.overwrite else ""
    om.write(f"Workspace ready at: {ws}{suffix}")
    om.write(f"Copied -> profiles: {copied.get('profiles', 0)}")


def _cmd_where(args, om: OutputManager) -> None:
    om.write(f"Workspace: {workspace_dir()}")
    om.write(f"Package:   {pkg_files('numkit')}")


_COMMANDS = {
    "ncr": _cmd_choose,
    "npr": _cmd_choose,
    "pow": _cmd_pow,
    "table": _cmd_table,
    "bin": _cmd_bin,
    "int": _cmd_int,
    "prime": _cmd_prime,
    "pow2": _cmd_pow2,
    "solve": _cmd_solve,
    "profiles": _cmd_profiles,
    "init": _cmd_init,
    "where": _cmd_where,
}


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)
    reset()  # every invocation starts from built-in defaults

    parser = _build_parser()
    args = parser.parse_args(argv)
    rt = _rt_current()
    if args.debug:
        rt.debug = True

    if not ensure_runtime_deps(strict=True):
        return 1

    # first run: copy packaged profiles into the workspace
    ws, seeded, _ = ensure_workspace_seeded()
    if seeded:
        _debug(f"seeded workspace at {ws}")

    _apply_profile(args.profile, debug=args.debug)
    set_int_digit_limit(digit_limit())

    try:
        target = validate_output_setting(args.output if args.output is not None else CFG("OUTPUT.OUTPUT_FILE", None))
    except ValueError as e:
        raise UserInputError(f"--output: {e}") from None

    om = OutputManager(output_file=target, quiet=args.quiet)
    try:
        _COMMANDS[args.command](args, om)
    finally:
        om.close()
    if om.path:
        _debug(f"output appended to {om.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
