import json
from pathlib import Path

import pytest
from sympy.polys.domains import ZZ
from sympy.polys.galoistools import gf_from_int_poly, gf_gcdex, gf_mul, gf_rem

from gf25.fields.fq import MODULUS
from gf25.fields.fq2 import NON_RESIDUE, Fq2Element


def pytest_addoption(parser):
    parser.addoption(
        "--save-to-json",
        action="store",
        nargs="?",
        const="vectors_json",
        help="Save the computed test vectors to JSON files in the specified directory",
    )


@pytest.fixture
def save_to_json_folder(request):
    return request.config.getoption("--save-to-json")


@pytest.fixture
def save_vectors(save_to_json_folder):
    """Return a function appending a test vector to `data/<folder>/<area>/<filename>.json`."""

    def save(area, filename, test_name, vector):
        if not save_to_json_folder:
            return
        output_dir = Path("data") / save_to_json_folder / area
        output_dir.mkdir(parents=True, exist_ok=True)
        json_file = output_dir / f"{filename}.json"

        data = {}

        if json_file.exists():
            with json_file.open("r") as f:
                data = json.load(f)

        data.setdefault(test_name, []).append(vector)

        with json_file.open("w") as f:
            json.dump(data, f, indent=4)

    return save


class Fq2Reference:
    """Reference model of F_q^2 as the quotient GF(q)[t] / (t^2 - NON_RESIDUE), computed with sympy."""

    modulus = MODULUS
    defining_polynomial = gf_from_int_poly([1, 0, -NON_RESIDUE], MODULUS)

    def to_poly(self, x: Fq2Element):
        return gf_from_int_poly([x.x1, x.x0], self.modulus)

    def from_poly(self, poly) -> Fq2Element:
        coefficients = [0] * (2 - len(poly)) + [int(c) for c in poly]
        return Fq2Element(coefficients[1], coefficients[0])

    def mul(self, x: Fq2Element, y: Fq2Element) -> Fq2Element:
        product = gf_mul(self.to_poly(x), self.to_poly(y), self.modulus, ZZ)
        return self.from_poly(gf_rem(product, self.defining_polynomial, self.modulus, ZZ))

    def inverse(self, x: Fq2Element) -> Fq2Element:
        s, _, h = gf_gcdex(self.to_poly(x), self.defining_polynomial, self.modulus, ZZ)
        assert [int(c) for c in h] == [1]
        return self.from_poly(gf_rem(s, self.defining_polynomial, self.modulus, ZZ))


@pytest.fixture(scope="session")
def fq2_reference():
    return Fq2Reference()
