from datetime import datetime
from pathlib import Path

import pytest

import eventagenda.__main__ as cli
from eventagenda.config.settings import AgendaConfig
from eventagenda.core.agenda import build_agenda, load_events
from eventagenda.core.event_model import AllDayEvent, OnceEvent, RecurringEvent
from eventagenda.exceptions.errors import DocumentError, DocumentReadError, HeaderParseError, MissingFieldError
from eventagenda.storage.documents import iter_documents, list_document_paths

NOW = datetime(2024, 6, 3, 8, 0)

STANDUP = """---
title: Standup
date: 2024-06-03
startTime: 09:00
endTime: 09:15
---
Notes for the standup.
"""

GYM = """---
title: Gym
type: recurring
startTime: 18:00
endTime: 19:00
startRecur: 2024-01-01
endRecur: ""
daysOfWeek:
  - M
  - W
---
"""

HOLIDAY = """---
allDay: true
title: Holiday
date: 2024-06-03
endDate: 2024-06-04
---
"""

OLD_MEETING = """---
title: Retro
date: 2024-05-27
startTime: 10:00
endTime: 11:00
---
"""


@pytest.fixture
def event_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "events"
    directory.mkdir()
    (directory / "b-gym.md").write_text(GYM, encoding="utf-8")
    (directory / "a-standup.md").write_text(STANDUP, encoding="utf-8")
    (directory / "c-holiday.md").write_text(HOLIDAY, encoding="utf-8")
    (directory / "d-retro.md").write_text(OLD_MEETING, encoding="utf-8")
    (directory / "archive").mkdir()
    (directory / "archive" / "broken.md").write_text("---\nnot a header\n---\n", encoding="utf-8")
    return directory


@pytest.fixture
def no_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_config", lambda: AgendaConfig())


def test_list_document_paths_skips_directories(event_dir: Path) -> None:
    names = [path.name for path in list_document_paths(event_dir)]

    assert names == ["a-standup.md", "b-gym.md", "c-holiday.md", "d-retro.md"]


def test_missing_directory_is_read_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentReadError) as excinfo:
        list(iter_documents([tmp_path / "nope"]))

    assert excinfo.value.path == tmp_path / "nope"


def test_load_events_in_enumeration_order(event_dir: Path) -> None:
    events = load_events([event_dir])

    assert [type(e) for e in events] == [OnceEvent, RecurringEvent, AllDayEvent, OnceEvent]
    assert [e.title for e in events] == ["Standup", "Gym", "Holiday", "Retro"]


def test_load_events_across_directories(event_dir: Path, tmp_path: Path) -> None:
    other = tmp_path / "more"
    other.mkdir()
    (other / "standup.md").write_text(STANDUP.replace("Standup", "Second standup"), encoding="utf-8")

    events = load_events([event_dir, other])

    assert events[-1].title == "Second standup"


def test_build_agenda(event_dir: Path) -> None:
    agenda = build_agenda([event_dir], NOW)

    assert [e.title for e in agenda] == ["Holiday", "Standup", "Gym"]


def test_first_bad_document_aborts_load(event_dir: Path) -> None:
    (event_dir / "0-bad.md").write_text("---\ntitle: No times\ndate: 2024-06-03\n---\n", encoding="utf-8")

    with pytest.raises(DocumentError) as excinfo:
        load_events([event_dir])

    assert excinfo.value.path.name == "0-bad.md"
    assert isinstance(excinfo.value.cause, MissingFieldError)
    assert excinfo.value.cause.field == "startTime"


def test_structural_error_is_wrapped(event_dir: Path) -> None:
    (event_dir / "e-bad.md").write_text("---\ndaysOfWeek: M, W\n---\n", encoding="utf-8")

    with pytest.raises(DocumentError) as excinfo:
        load_events([event_dir])

    assert isinstance(excinfo.value.cause, HeaderParseError)


def test_cli_prints_ordered_agenda(event_dir: Path, no_settings: None, capsys: pytest.CaptureFixture) -> None:
    exit_code = cli.main([str(event_dir), "--at", "2024-06-03T08:00"])

    out, err = capsys.readouterr()
    assert exit_code == 0
    assert out.splitlines() == [
        "Today                    | Holiday",
        "09:00 - 09:15 (1 hour)   | Standup",
        "18:00 - 19:00 (10 hours) | Gym",
    ]


def test_cli_error_suppresses_output(event_dir: Path, no_settings: None, capsys: pytest.CaptureFixture) -> None:
    (event_dir / "e-bad.md").write_text(
        "---\ntitle: Bad\ndate: 2024-06-03\nstartTime: noon\nendTime: 13:00\n---\n",
        encoding="utf-8",
    )

    exit_code = cli.main([str(event_dir), "--at", "2024-06-03T08:00"])

    out, err = capsys.readouterr()
    assert exit_code == 1
    assert out == ""
    assert err.startswith("Error processing event files:")
    assert "e-bad.md" in err
    assert "startTime" in err


def test_cli_rejects_bad_at_value(event_dir: Path, no_settings: None, capsys: pytest.CaptureFixture) -> None:
    exit_code = cli.main([str(event_dir), "--at", "yesterday-ish"])

    out, err = capsys.readouterr()
    assert exit_code == 1
    assert out == ""
    assert "--at" in err


def test_cli_requires_directories(no_settings: None, capsys: pytest.CaptureFixture) -> None:
    exit_code = cli.main([])

    _, err = capsys.readouterr()
    assert exit_code == 2
    assert "EVENTAGENDA_DIRS" in err


def test_cli_uses_configured_directories(
    event_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(cli, "load_config", lambda: AgendaConfig(event_dirs=[str(event_dir)]))

    exit_code = cli.main(["--at", "2024-06-03T18:30"])

    out, _ = capsys.readouterr()
    assert exit_code == 0
    assert out.splitlines() == [
        "Today                    | Holiday",
        "18:00 - 19:00 (Now)      | Gym",
    ]


def test_cli_shifts_aware_at_into_configured_zone(
    event_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(cli, "load_config", lambda: AgendaConfig(timezone="Europe/London"))

    # 07:00 UTC is 08:00 in London during summer time
    exit_code = cli.main([str(event_dir), "--at", "2024-06-03T07:00+00:00"])

    out, _ = capsys.readouterr()
    assert exit_code == 0
    assert out.splitlines() == [
        "Today                    | Holiday",
        "09:00 - 09:15 (1 hour)   | Standup",
        "18:00 - 19:00 (10 hours) | Gym",
    ]
