import pytest

from cli.app import LinearSystemCLI
import cli.app as app_module
import main as entry
from solver.elimination import (
    Inconsistent,
    Infinite,
    InvalidShapeError,
    NumericalInstabilityError,
    Unique,
)


def _scripted(lines):
    it = iter(lines)
    return lambda prompt="": next(it)


def _make_app(lines, **kwargs):
    out = []
    app = LinearSystemCLI(input_func=_scripted(lines), output_func=out.append, **kwargs)
    return app, out


def test_manual_entry_unique_solution() -> None:
    app, out = _make_app(["1", "2", "2", "1", "1", "3", "2", "-1", "0"])
    result = app.run()

    assert isinstance(result, Unique)
    assert result.values == pytest.approx((1.0, 2.0))
    text = "\n".join(out)
    assert text.startswith("=== Linear System Solver ===")
    assert "--- Equation 2 ---" in text
    assert "=== System of Equations ===" in text
    assert "=== Solution Process ===" in text
    assert "Swap row 1 with row 2" in text
    assert out[-1].splitlines() == [
        "=== Solution Summary ===",
        "The system has a unique solution:",
        "X = 1",
        "Y = 2",
    ]


def test_manual_entry_reprompts_invalid_values() -> None:
    lines = ["3", "1",          # bad menu choice, then manual
             "0", "1",          # equations: too small, then 1
             "abc", "1",        # variables: invalid, then 1
             "five", "1e13", "5", "15"]
    app, out = _make_app(lines)
    result = app.run()

    assert result == Unique((3.0,))
    assert any("Value too large" in line for line in out)
    assert any("Value too small" in line for line in out)
    assert any("Invalid input 'abc'" in line for line in out)
    assert any("Number too large" in line for line in out)


def test_manual_entry_accepts_fractions_and_commas() -> None:
    app, _ = _make_app(["1", "1", "1", "1/2", "0,25"])
    assert app.run() == Unique((0.5,))


@pytest.mark.parametrize("rows,expected,message", [
    (["1", "1", "1", "1", "1", "2"], Inconsistent(), "no solution"),
    (["1", "1", "3", "2", "2", "6"], Infinite(), "infinitely many solutions"),
    (["0", "1", "1", "0", "1", "2"], Inconsistent(), "no solution"),
    (["0", "1", "2", "0", "2", "4"], Infinite(), "infinitely many solutions"),
])
def test_manual_entry_non_unique(rows, expected, message) -> None:
    app, out = _make_app(["1", "2", "2"] + rows)
    assert app.run() == expected
    assert message in out[-1]


def test_random_generation_is_seeded() -> None:
    app1, out1 = _make_app(["2", "3", "3"], rng=42)
    app2, out2 = _make_app(["2", "3", "3"], rng=42)
    assert app1.run() == app2.run()
    assert out1 == out2
    text = "\n".join(out1)
    assert "between -100 and 100" in text
    assert "Warning: This may not have a unique solution!" in text
    assert "Basic random matrix generated successfully!" in text


def test_random_generation_uses_settings() -> None:
    settings = {"random_min": 1, "random_max": 1, "seed": 3}
    app, out = _make_app(["2", "2", "2"], settings=settings)
    # every row is X + Y = 1
    assert app.run() == Infinite()
    assert "between 1 and 1" in "\n".join(out)


def test_dimension_limits_come_from_settings() -> None:
    app, out = _make_app(["1", "3", "2", "1", "5", "15", "1", "2", "1", "3"],
                         settings={"max_equations": 2})
    app.run()
    assert any("less than or equal to 2" in line for line in out)


def test_friendly_error_messages() -> None:
    msg_solver = LinearSystemCLI._friendly_error(NumericalInstabilityError("pivot"))
    assert "could not finish" in msg_solver
    assert "Details: pivot" in msg_solver

    msg_generic = LinearSystemCLI._friendly_error(RuntimeError("boom"))
    assert "unexpected problem" in msg_generic
    assert "Details: boom" in msg_generic


# ── main entry point ─────────────────────────────────────────────────────

@pytest.fixture
def quiet_main(monkeypatch):
    monkeypatch.setattr(entry, "get_settings", lambda: dict(app_module.DEFAULT_SETTINGS))
    monkeypatch.setattr(entry, "setup_logging", lambda level, log_file=None: None)


def test_main_returns_zero_on_success(monkeypatch, quiet_main) -> None:
    monkeypatch.setattr(LinearSystemCLI, "run", lambda self: Unique((1.0,)))
    assert entry.main() == 0


@pytest.mark.parametrize("exc,code,text", [
    (InvalidShapeError("ragged"), 1, "Details: ragged"),
    (EOFError(), 1, "Goodbye"),
    (KeyboardInterrupt(), 130, "Interrupted"),
])
def test_main_handles_errors(monkeypatch, capsys, quiet_main, exc, code, text) -> None:
    def _raise(self):
        raise exc

    monkeypatch.setattr(LinearSystemCLI, "run", _raise)
    assert entry.main() == code
    assert text in capsys.readouterr().out
