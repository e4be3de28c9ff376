from doseengine.config import DoseConfig
from doseengine.presets import ACETAMINOPHEN, IBUPROFEN
from doseengine.session import NO_HISTORY, DoseSession
from doseengine.types import Severity


def test_dose_requires_weight():
    s = DoseSession()
    status = s.calculate(ACETAMINOPHEN)
    assert status.severity is Severity.ERROR
    assert s.history.count() == 0
    assert s.status == status


def test_weight_validation_and_caution():
    s = DoseSession()

    assert s.set_weight_kg(0).severity is Severity.ERROR
    assert s.set_weight_kg(-4).severity is Severity.ERROR
    assert s.weight_kg is None

    # outside [5, 99]: accepted, but flagged
    assert s.set_weight_kg(3.0).severity is Severity.CAUTION
    assert s.weight_kg == 3.0
    assert s.set_weight_kg(105.0).severity is Severity.CAUTION
    assert s.weight_kg == 105.0

    # kg weights are kept as entered
    assert s.set_weight_kg(12.345).severity is Severity.SUCCESS
    assert s.weight_kg == 12.345


def test_caution_range_comes_from_config():
    s = DoseSession(DoseConfig(caution_low_kg=2.0, caution_high_kg=150.0))
    assert s.set_weight_kg(3.0).severity is Severity.SUCCESS
    assert s.set_weight_kg(1.0).severity is Severity.CAUTION


def test_weight_in_pounds():
    s = DoseSession()
    assert s.set_weight_lb(22).severity is Severity.SUCCESS
    assert s.weight_kg == 10.0
    assert s.set_weight_lb(0).severity is Severity.ERROR
    assert s.weight_kg == 10.0


def test_repeat_calculation_is_skipped_as_duplicate():
    s = DoseSession()
    s.set_weight_kg(10)

    first = s.calculate(ACETAMINOPHEN)
    second = s.calculate(ACETAMINOPHEN)

    assert first.severity is Severity.SUCCESS
    assert first.message == "Acetaminophen >> Weight: 10.00kg >> Dose = 4.69 mL"
    assert second.severity is Severity.INFO
    assert "Duplicate" in second.message
    assert s.history.count() == 1


def test_kg_weights_within_tolerance_are_one_entry():
    """10.00 kg then 10.005 kg for the same medication stores a single entry."""
    s = DoseSession()
    s.set_weight_kg(10.0)
    s.calculate(ACETAMINOPHEN)
    s.set_weight_kg(10.005)

    status = s.calculate(ACETAMINOPHEN)

    assert status.severity is Severity.INFO
    assert [e.weight_kg for e in s.history.all()] == [10.0]

    s.set_weight_kg(10.02)
    s.calculate(ACETAMINOPHEN)
    assert s.history.count() == 2


def test_calculate_all_presets_reports_skips():
    s = DoseSession()
    s.set_weight_kg(10)
    s.calculate(IBUPROFEN)

    status = s.calculate_all()
    assert status.severity is Severity.SUCCESS
    assert "2 preset" in status.message
    assert "1 duplicate" in status.message
    assert [e.medication for e in s.history.all()] == ["Ibuprofen", "Acetaminophen", "Diphenhydramine"]

    again = s.calculate_all()
    assert again.severity is Severity.INFO
    assert "3 duplicate" in again.message
    assert s.history.count() == 3


def test_manual_entry():
    s = DoseSession()
    s.set_weight_kg(20)

    ok = s.calculate_manual("Cetirizine", 5, 5, 0.25)
    assert ok.severity is Severity.SUCCESS
    assert ok.message == "Cetirizine >> Weight: 20.00kg >> Dose = 5.00 mL"

    bad = s.calculate_manual("Cetirizine", 0, 5, 0.25)
    assert bad.severity is Severity.ERROR
    assert s.history.count() == 1


def test_chart_appends_new_rows_only():
    s = DoseSession()
    s.set_weight_kg(5.5)
    s.calculate(ACETAMINOPHEN)

    status = s.chart(ACETAMINOPHEN, 5, 6, 0.5)
    assert status.severity is Severity.SUCCESS
    assert [e.weight_kg for e in s.history.all()] == [5.5, 5.0, 6.0]


def test_bad_chart_range_changes_nothing():
    s = DoseSession()
    assert s.chart(ACETAMINOPHEN, 10, 5, 1).severity is Severity.ERROR
    assert s.chart(ACETAMINOPHEN, 5, 10, 0).severity is Severity.ERROR
    assert s.history.count() == 0


def test_clear_history():
    s = DoseSession()
    s.chart(IBUPROFEN, 5, 10, 1)
    assert s.history.count() == 6
    assert s.clear_history() == NO_HISTORY
    assert s.status == NO_HISTORY
    assert s.history.count() == 0


def test_export_empty_history_is_an_error(tmp_path):
    s = DoseSession()
    status = s.export(tmp_path)
    assert status.severity is Severity.ERROR
    assert list(tmp_path.iterdir()) == []


def test_export_writes_history_in_order(tmp_path):
    s = DoseSession(DoseConfig(export_dir=str(tmp_path)))
    s.set_weight_kg(10)
    s.calculate_all()

    status = s.export()
    assert status.severity is Severity.SUCCESS

    files = list(tmp_path.iterdir())
    assert len(files) == 1
    assert files[0].name.startswith("Pediatric Dosage Summary ")
    lines = files[0].read_text(encoding="utf-8").splitlines()
    assert lines == s.history.summaries()
