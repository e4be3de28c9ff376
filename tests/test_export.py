from datetime import datetime

import pytest

from doseengine.dosing import compute_dose, dose_for_profile
from doseengine.export import EmptyHistoryError, export_filename, export_history
from doseengine.presets import ACETAMINOPHEN, DIPHENHYDRAMINE, IBUPROFEN

STAMP = datetime(2026, 10, 19, 14, 25, 1)


def test_filename_embeds_timestamp():
    assert export_filename(STAMP) == "Pediatric Dosage Summary 20261019_142501.txt"


def test_empty_history_creates_no_file(tmp_path):
    with pytest.raises(EmptyHistoryError):
        export_history([], tmp_path, now=STAMP)
    assert list(tmp_path.iterdir()) == []


def test_one_line_per_entry_in_order(tmp_path):
    entries = [dose_for_profile(p, 12.0) for p in (IBUPROFEN, ACETAMINOPHEN, DIPHENHYDRAMINE)]

    path = export_history(entries, tmp_path, now=STAMP)

    assert path == tmp_path / "Pediatric Dosage Summary 20261019_142501.txt"
    text = path.read_text(encoding="utf-8")
    assert text.splitlines() == [e.summary for e in entries]
    assert text.endswith("\n")


def test_missing_export_folder_is_created(tmp_path):
    target = tmp_path / "exports" / "today"
    path = export_history([dose_for_profile(IBUPROFEN, 8.0)], target, now=STAMP)
    assert path.parent == target
    assert path.exists()


def test_non_ascii_names_are_utf8(tmp_path):
    entry = compute_dose(10, 120, 5, 15, name="Paracétamol")
    path = export_history([entry], tmp_path, now=STAMP)
    assert "Paracétamol" in path.read_bytes().decode("utf-8")
