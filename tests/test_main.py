import pytest

from gf25.__main__ import main


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        ([], "[3]P = Point at Infinity"),
        (["--scalar", "2"], "[2]P = (1 + 2t, 1 + 1t)"),
        (["--scalar", "0"], "[0]P = Point at Infinity"),
        (["--curve-a", "1", "0", "--point", "0", "0", "1", "0", "--scalar", "4"], "[4]P = (3, 4)"),
        (["--curve-a", "0", "1", "--scalar", "3"], "[3]P = (2 + 2t, 3 + 1t)"),
        (["--infinity", "--scalar", "5"], "[5]P = Point at Infinity"),
    ],
)
def test_main(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_main_with_config(tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text("curve_a = [1, 0]\npoint = [3, 1, 1, 3]\nscalar = 7\n")

    assert main(["--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "[7]P = (2 + 3t, 4t)"

    assert main(["--config", str(config), "--scalar", "9"]) == 0
    assert capsys.readouterr().out.strip() == "[9]P = Point at Infinity"


def test_main_config_point_at_infinity(tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text("point = []\nscalar = 2\n")

    assert main(["--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "[2]P = Point at Infinity"


def test_main_invalid_scalar(capsys):
    assert main(["--scalar", "-1"]) == 1
    assert "non-negative" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("curve_b = [1, 0]\n", "curve_b"),
        ("curve_a = 1\n", "curve_a"),
        ("curve_a = [1.5, 0]\n", "curve_a"),
        ("curve_a = [1]\n", "two components"),
        ("point = \"1 2 4 4\"\n", "point"),
        ("point = [1, 2, \"4\", 4]\n", "point"),
        ("point = [1, 2, 4]\n", "four components"),
        ("scalar = \"3\"\n", "scalar"),
        ("scalar = 3.0\n", "scalar"),
        ("scalar = true\n", "scalar"),
    ],
)
def test_main_invalid_config(content, message, tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text(content)

    assert main(["--config", str(config)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("gf25:")
    assert message in err


def test_main_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.toml")]) == 1
    assert capsys.readouterr().err.startswith("gf25:")
