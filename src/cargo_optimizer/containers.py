# src/cargo_optimizer/containers.py
from __future__ import annotations

from typing import Optional

from cargo_optimizer.models import Container

# Internal usable dims (cm) and max payload (kg).
CONTAINER_PRESETS: dict[str, dict[str, Container]] = {
    "sea": {
        "20ft":    Container(length=589,  width=235, height=239, max_weight=28200),
        "40ft":    Container(length=1203, width=235, height=239, max_weight=28800),
        "40ft HC": Container(length=1203, width=235, height=269, max_weight=28600),
    },
    "air": {
        "LD3 (AKE/AVE)": Container(length=156, width=153, height=163, max_weight=1588),
        "LD6 (ALF/ALP)": Container(length=318, width=153, height=163, max_weight=3175),
        "LD9 (AAP)":     Container(length=318, width=224, height=163, max_weight=4626),
    },
}

DEFAULT_PRESETS: dict[str, str] = {
    "sea": "20ft",
    "air": "LD3 (AKE/AVE)",
}


def _normalize(name: str) -> str:
    return " ".join(name.split()).upper()


def list_presets(mode: Optional[str] = None) -> dict[str, Container]:
    if mode is None:
        return {name: c for presets in CONTAINER_PRESETS.values() for name, c in presets.items()}
    key = mode.strip().lower()
    if key not in CONTAINER_PRESETS:
        raise ValueError(f"Unknown transport mode '{mode}'. Valid: {sorted(CONTAINER_PRESETS.keys())}")
    return dict(CONTAINER_PRESETS[key])


def get_container(preset: str) -> Container:
    key = _normalize(preset)
    for name, container in list_presets().items():
        if _normalize(name) == key:
            return container
    raise ValueError(f"Unknown container preset '{preset}'. Valid: {sorted(list_presets().keys())}")


def default_container(mode: str = "sea") -> Container:
    presets = list_presets(mode)
    return presets[DEFAULT_PRESETS[mode.strip().lower()]]
