# tests/test_scripts.py
"""Tests for the operator scripts."""

from sqlalchemy.orm import sessionmaker

from stakeguard.scripts import clock as clock_script
from stakeguard.services.clock import DatabaseClock


def test_clock_script_advances_and_exits_cleanly(engine, db_session, monkeypatch, capsys) -> None:
    monkeypatch.setattr(clock_script, "SessionLocal", sessionmaker(bind=engine, autoflush=False))

    assert clock_script.main(["--blocks", "3"]) is None
    assert clock_script.main([]) is None

    assert DatabaseClock(db_session).now() == 4
    assert capsys.readouterr().out.splitlines() == [
        "Block clock at height 3",
        "Block clock at height 4",
    ]
