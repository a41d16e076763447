from __future__ import annotations

import csv
import io
from datetime import date

from rt.tracker.export import CSV_MEDIA_TYPE, build_export, export_filename, render_csv
from rt.tracker.model import ReleaseRecord


def _records() -> list[ReleaseRecord]:
    return [
        ReleaseRecord(id=1, name="Alpha", product="CRM", date=date(2024, 3, 10), type="bug-fix"),
        ReleaseRecord(
            id=2, name="Beta", product="ERP", date=date(2024, 11, 2), type="platform-req"
        ),
    ]


def test_header_and_rows_are_fully_quoted() -> None:
    text = render_csv(_records())

    assert text.splitlines() == [
        '"Release Name","Product","Date","Year","Month","Release Type"',
        '"Alpha","CRM","2024-03-10","2024","March","Bug Fix"',
        '"Beta","ERP","2024-11-02","2024","November","Platform Requirement"',
    ]


def test_quotes_and_commas_are_escaped() -> None:
    record = ReleaseRecord(
        id=3, name='The "Big" one, part 2', product="A,B", date=date(2024, 1, 1), type="planned"
    )

    text = render_csv([record])

    assert '"The ""Big"" one, part 2","A,B"' in text
    rows = list(csv.reader(io.StringIO(text)))
    assert rows[1][0] == 'The "Big" one, part 2'
    assert rows[1][1] == "A,B"


def test_unknown_type_falls_back_to_id() -> None:
    record = ReleaseRecord(id=4, name="Old", product="P", date=date(2024, 1, 1), type="legacy")

    assert render_csv([record]).splitlines()[1].endswith('"legacy"')


def test_empty_export_has_header_only() -> None:
    assert len(render_csv([]).splitlines()) == 1


def test_build_export_metadata() -> None:
    export = build_export(_records(), year=2024)

    assert export.filename == "IBP_Release_Tracker_2024.csv"
    assert export.media_type == CSV_MEDIA_TYPE == "text/csv"
    assert export.content.decode("utf-8") == render_csv(_records())


def test_export_filename_prefix() -> None:
    assert export_filename(2031, "Team") == "Team_2031.csv"
