import json
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIR = Path("data")


def parse_record(raw):
    """
    Turn one stored crossing day into {"record_id", "vehicle", "crossings"}
    with the crossings parsed into datetimes. Raises ValueError on bad data.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"record is not an object: {raw!r}")

    record_id = raw.get("record_id")
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise ValueError(f"record_id must be an integer: {record_id!r}")

    vehicle = raw.get("vehicle")
    if not isinstance(vehicle, str) or not vehicle.strip():
        raise ValueError(f"record {record_id}: vehicle must be a tag string")

    stamps = raw.get("crossings")
    if not isinstance(stamps, list):
        raise ValueError(f"record {record_id}: crossings must be a list")
    crossings = []
    for t in stamps:
        if not isinstance(t, str):
            raise ValueError(f"record {record_id}: crossing {t!r} is not an ISO timestamp")
        crossings.append(datetime.fromisoformat(t))

    return {"record_id": record_id, "vehicle": vehicle, "crossings": crossings}


def load_crossings(filename):
    """Load recorded crossing days; malformed records are logged and skipped."""
    path = DATA_DIR / filename
    if not path.exists():
        return []
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw_records = json.load(f)
        except json.JSONDecodeError as exc:
            logger.error("Cannot read %s: %s", path, exc)
            return []

    if not isinstance(raw_records, list):
        logger.error("%s must hold a list of records", path)
        return []

    records = []
    for raw in raw_records:
        try:
            records.append(parse_record(raw))
        except ValueError as exc:
            logger.warning("Skipping record in %s: %s", path, exc)
    return records
