from growcalc.cli import check_system
from growcalc.cli.vpd import main


def test_cli_basic(capsys):
    assert main(["75", "60"]) == 0
    out = capsys.readouterr().out
    assert "VPD 1.19 kPa - Good for Vegetative" in out
    assert "Using optimal range for vegetative stage" in out
    assert "DLI" not in out


def test_cli_recommendations_and_dli(capsys):
    main(["75", "60", "--target", "1.0", "--ppfd", "500", "--photoperiod", "12"])
    out = capsys.readouterr().out
    assert "VPD is 0.19 kPa too high" in out
    assert "Increase humidity" in out
    assert "Decrease temperature" in out
    assert "DLI 21.6" in out


def test_cli_on_target_celsius_leaf(capsys):
    main(["24", "60", "--unit", "C", "--leaf-offset", "1", "--stage", "flowering", "--target", "1.0"])
    out = capsys.readouterr().out
    assert "Leaf temperature 23.0°C" in out
    assert "Target: 1.0 kPa (using leaf temp)" in out


def test_cli_heatmap(capsys):
    main(["75", "60", "--heatmap"])
    out = capsys.readouterr().out
    assert "\x1b[48;2;" in out
    assert "65°F → 84°F" in out


def test_required_packages_cover_runtime_stack():
    assert {"flask", "redis", "pytz"} <= {name.lower() for name in check_system.required_packages()}


def test_check_python_package(capsys):
    assert check_system.check_python_package("pytest")
    assert not check_system.check_python_package("growcalc-no-such-package")
    out = capsys.readouterr().out
    assert "✅ pytest " in out
    assert "❌ growcalc-no-such-package is NOT installed" in out
