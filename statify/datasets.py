"""Built-in sample datasets for trying out the calculator."""

from __future__ import annotations

SAMPLE_DATASETS: dict[str, list[float]] = {
    "test-scores": [
        72, 85, 90, 68, 75, 82, 78, 95, 88, 92, 70, 85, 80,
        77, 94, 65, 89, 73, 81, 87, 76, 83, 91, 69, 84,
    ],
    "heights": [
        165, 172, 168, 175, 180, 162, 170, 178, 169, 173,
        167, 174, 171, 176, 163, 179, 166, 177, 164, 181,
    ],
    "temperatures": [
        22, 25, 28, 30, 27, 24, 26, 29, 31, 23, 25, 28, 32, 29, 26,
        24, 27, 30, 28, 25, 23, 26, 29, 31, 27, 24, 28, 30, 26, 25,
    ],
    "sales": [
        15000, 18500, 22000, 19500, 21000, 25000, 23500, 20000,
        17500, 24000, 26500, 28000, 22500, 19000, 27000,
    ],
}


def list_datasets() -> list[str]:
    """Names of the available sample datasets."""
    return sorted(SAMPLE_DATASETS)


def get_dataset(name: str) -> list[float]:
    """Get a copy of a sample dataset as floats.

    Raises:
        KeyError: If no dataset has that name
    """
    if name not in SAMPLE_DATASETS:
        raise KeyError(
            f"Unknown dataset: '{name}'. Available: {', '.join(list_datasets())}"
        )
    return [float(v) for v in SAMPLE_DATASETS[name]]
