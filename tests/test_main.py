"""Tests for the demonstration entrypoint."""

from main import main


def test_main_prints_both_cars(capsys) -> None:
    """The demo prints the sports car then the family car."""
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Car{seats=2, engine=Sport Engine, hasGPS=true, hasTripComputer=true}",
        "Car{seats=5, engine=Diesel Engine, hasGPS=false, hasTripComputer=false}",
    ]


def test_main_ignores_unknown_log_level(capsys, monkeypatch) -> None:
    """An unrecognised LOG_LEVEL falls back to WARNING instead of failing."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Car{seats=2")
