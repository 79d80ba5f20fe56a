"""Compute the scalar multiple `[n]P` of a point on an elliptic curve over F_5^2.

Example:
    $ python -m gf25
    [3]P = Point at Infinity
    $ python -m gf25 --scalar 2
    [2]P = (1 + 2t, 1 + 1t)
    $ python -m gf25 --curve-a 1 0 --point 0 0 1 0 --scalar 4
    [4]P = (3, 4)

The inputs can also be read from a TOML file passed with `--config`:

    curve_a = [1, 0]
    point = [1, 2, 4, 4]
    scalar = 3

An empty `point` list selects the point at infinity. Values given on the command line take precedence over the
ones in the file.
"""

import argparse
import sys
import tomllib
from pathlib import Path

from gf25.elliptic_curves.ec_operations_fq2 import scalar_multiplication
from gf25.fields.fq2 import Fq2Element
from gf25.types.points import POINT_AT_INFINITY, AffinePoint, Point

DEFAULT_CURVE_A = [1, 0]
DEFAULT_POINT = [1, 2, 4, 4]
DEFAULT_SCALAR = 3

parser = argparse.ArgumentParser(
    prog="gf25",
    description="Compute [n]P for a point P on the elliptic curve y^2 = x^3 + a * x + b over F_5^2 = F_5[t] / (t^2 - 3).",
)
parser.add_argument("--config", type=Path, help="TOML file with the keys curve_a, point and scalar", required=False)
parser.add_argument(
    "--curve-a", type=int, nargs=2, metavar=("A0", "A1"), help="The coefficient a = A0 + A1 * t", required=False
)
point_group = parser.add_mutually_exclusive_group()
point_group.add_argument(
    "--point",
    type=int,
    nargs=4,
    metavar=("X0", "X1", "Y0", "Y1"),
    help="The point P = (X0 + X1 * t, Y0 + Y1 * t)",
    required=False,
)
point_group.add_argument("--infinity", action="store_true", help="Take P to be the point at infinity")
parser.add_argument("--scalar", type=int, help="The non-negative scalar n", required=False)


def load_config(path: Path) -> dict:
    """Load the inputs stored in the TOML file at `path`."""
    with path.open("rb") as f:
        config = tomllib.load(f)
    unknown_keys = set(config) - {"curve_a", "point", "scalar"}
    if unknown_keys:
        msg = f"Unknown keys in {path}: {sorted(unknown_keys)}"
        raise ValueError(msg)

    for key in ("curve_a", "point"):
        if key in config and not (isinstance(config[key], list) and all(is_integer(v) for v in config[key])):
            msg = f"{key} in {path} must be a list of integers: {config[key]!r}"
            raise ValueError(msg)
    if "scalar" in config and not is_integer(config["scalar"]):
        msg = f"scalar in {path} must be an integer: {config['scalar']!r}"
        raise ValueError(msg)
    return config


def is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_inputs(args: argparse.Namespace) -> tuple[Fq2Element, Point, int]:
    """Merge command line arguments, configuration file and defaults into `(a, P, n)`."""
    config = load_config(args.config) if args.config is not None else {}

    curve_a = Fq2Element.from_list(args.curve_a or config.get("curve_a", DEFAULT_CURVE_A))
    if args.infinity:
        P = POINT_AT_INFINITY  # noqa: N806
    else:
        point = args.point or config.get("point", DEFAULT_POINT)
        P = AffinePoint.from_list(point) if point else POINT_AT_INFINITY  # noqa: N806
    n = args.scalar if args.scalar is not None else config.get("scalar", DEFAULT_SCALAR)

    return curve_a, P, n


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    try:
        curve_a, P, n = parse_inputs(args)  # noqa: N806
        nP = scalar_multiplication(n, P, curve_a)  # noqa: N806
    except (ValueError, ZeroDivisionError, tomllib.TOMLDecodeError, OSError) as e:
        print(f"gf25: {e}", file=sys.stderr)
        return 1

    print(f"[{n}]P = {nP}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
