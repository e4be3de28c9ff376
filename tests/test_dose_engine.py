import numpy as np
import pytest

from doseengine.dosing import compute_dose, dose_for_profile, lb_to_kg, round_half_up, weight_caution
from doseengine.presets import ACETAMINOPHEN, DIPHENHYDRAMINE, IBUPROFEN, make_profile
from doseengine.types import Severity


def test_acetaminophen_worked_example():
    """
    10 kg at 15 mg/kg of a 160 mg / 5 mL suspension:
      total = 150 mg, volume = 150 * 5 / 160 = 4.6875 -> 4.69 mL
    """
    e = compute_dose(10.0, 160.0, 5.0, 15.0, name="Acetaminophen")

    assert e.total_dose_mg == 150.0
    assert e.volume_ml == 4.69
    assert e.concentration == "160mg/5mL"
    assert e.summary == "Acetaminophen >> Weight: 10.00kg >> Dose = 4.69 mL"


def test_presets_at_ten_kg():
    assert dose_for_profile(IBUPROFEN, 10.0).volume_ml == 5.0
    assert dose_for_profile(DIPHENHYDRAMINE, 10.0).volume_ml == 4.0
    assert dose_for_profile(ACETAMINOPHEN, 10.0).summary.startswith("Acetaminophen >> ")


def test_volume_is_exact_value_rounded_to_two_places():
    """For any positive inputs the stored volume is within half a hundredth of r*w*v/s."""
    for w in (0.7, 3.3, 12.25, 47.0, 98.6):
        for s, v in ((160.0, 5.0), (100.0, 5.0), (12.5, 5.0), (40.0, 1.0)):
            for r in (0.5, 1.0, 7.5, 15.0):
                e = compute_dose(w, s, v, r)
                exact = r * w * v / s
                assert e.volume_ml == round_half_up(exact)
                assert np.isclose(e.volume_ml, exact, atol=0.005 + 1e-9)
                assert e.volume_ml == round(e.volume_ml, 2)


def test_round_half_up_breaks_ties_away_from_zero():
    assert round_half_up(4.6875) == 4.69
    assert round_half_up(1.005) == 1.01
    assert round_half_up(2.675) == 2.68
    assert round_half_up(2.674) == 2.67
    assert round_half_up(np.float64(4.6875)) == 4.69


def test_compute_dose_is_deterministic():
    assert compute_dose(12.5, 100, 5, 10) == compute_dose(12.5, 100, 5, 10)


def test_pounds_to_kilograms():
    assert lb_to_kg(22.0) == 10.0
    assert lb_to_kg(50.0) == 22.73
    assert lb_to_kg(11.0, lb_per_kg=2.2) == 5.0


def test_weight_caution_is_advisory_outside_range():
    assert weight_caution(5.0) is None
    assert weight_caution(99.0) is None
    assert weight_caution(4.99).severity is Severity.CAUTION
    assert weight_caution(120.0).severity is Severity.CAUTION
    assert weight_caution(120.0, high_kg=150.0) is None


def test_profile_concentration():
    assert ACETAMINOPHEN.concentration_label == "160mg/5mL"
    assert DIPHENHYDRAMINE.concentration_label == "12.5mg/5mL"
    assert np.isclose(IBUPROFEN.concentration_mg_per_ml, 20.0)


def test_make_profile_validates_inputs():
    p = make_profile("  Cetirizine ", 5, 5, 0.25)
    assert p.name == "Cetirizine"
    assert p.strength_mg == 5.0

    with pytest.raises(ValueError, match="strength_mg"):
        make_profile("X", 0, 5, 1)
    with pytest.raises(ValueError, match="dose_rate_mg_per_kg"):
        make_profile("X", 10, 5, -1)
    with pytest.raises(ValueError, match="blank"):
        make_profile("   ", 10, 5, 1)

