from __future__ import annotations

import pytest

from cargo_optimizer.containers import default_container, get_container, list_presets
from cargo_optimizer.models import Container


def test_get_container_is_case_and_space_insensitive() -> None:
    assert get_container("20ft") == Container(length=589, width=235, height=239, max_weight=28200)
    assert get_container("  40FT   hc ") == Container(length=1203, width=235, height=269, max_weight=28600)
    assert get_container("ld9 (aap)").max_weight == 4626


def test_unknown_preset_lists_valid_names() -> None:
    with pytest.raises(ValueError, match="Unknown container preset '53ft'"):
        get_container("53ft")


def test_list_presets_by_mode() -> None:
    assert list(list_presets("sea")) == ["20ft", "40ft", "40ft HC"]
    assert list(list_presets("AIR")) == ["LD3 (AKE/AVE)", "LD6 (ALF/ALP)", "LD9 (AAP)"]
    assert len(list_presets()) == 6

    with pytest.raises(ValueError):
        list_presets("rail")


def test_default_container_per_mode() -> None:
    assert default_container("sea") == get_container("20ft")
    assert default_container("air") == get_container("LD3 (AKE/AVE)")
