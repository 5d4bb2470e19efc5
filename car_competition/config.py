"""Configuration loader for the car competition registry."""

from pathlib import Path

import yaml

from car_competition.core.model_range import ModelRange

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
MODEL_RANGES_PATH: Path = DATA_DIR / "model_ranges.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("label", "newest", "oldest")

_BOUND_FIELDS: tuple[str, ...] = _REQUIRED_FIELDS[1:]  # all except label


def load_model_ranges(path: Path | None = None) -> list[ModelRange]:
    """Load the model-year range buckets from a YAML file.

    Each entry is validated and converted into a :class:`ModelRange`
    instance.  Order is preserved as listed in the file.

    Args:
        path: Optional override for the ranges file path.

    Returns:
        List of :class:`ModelRange` objects.

    Raises:
        FileNotFoundError: If the ranges file does not exist.
        ValueError: If any entry is missing fields, has non-integer
            bounds, inverted bounds, or a label that repeats.
    """
    ranges_path = path or MODEL_RANGES_PATH
    if not ranges_path.exists():
        raise FileNotFoundError(f"Model ranges file not found: {ranges_path}")

    with open(ranges_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("ranges"), list):
        raise ValueError(f"{ranges_path}: expected a top-level 'ranges' list")

    entries: list[dict] = data["ranges"]
    ranges: list[ModelRange] = []
    seen: set[str] = set()

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Range entry {idx} must be a mapping")

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Range entry {idx} ({entry.get('label', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate bounds are integers or null ---
        for field in _BOUND_FIELDS:
            val = entry[field]
            if val is not None and (isinstance(val, bool) or not isinstance(val, int)):
                raise ValueError(
                    f"Range entry {idx} ({entry['label']}): "
                    f"'{field}' must be an integer or null, got {type(val).__name__}"
                )

        label = str(entry["label"])
        if label in seen:
            raise ValueError(f"Range entry {idx}: duplicate label '{label}'")
        seen.add(label)

        ranges.append(
            ModelRange(label=label, newest=entry["newest"], oldest=entry["oldest"])
        )

    return ranges
