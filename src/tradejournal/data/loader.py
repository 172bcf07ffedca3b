"""Trade journal loader.

Reads journal exports into validated Trade models. Supported formats:

    .csv          one trade per row, header row with Trade field names
    .json         a list of trade objects, or {"trades": [...]}
    .yaml/.yml    same shape as JSON

CSV specifics:
    - empty cells are treated as missing (an empty exit_price is an open trade)
    - ``tags`` is a ";" or "," separated list

Unknown columns are ignored. Invalid rows raise TradeLoadError with the
row number; nothing is silently dropped.
"""

import csv
import json
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from tradejournal.analytics.models import Trade

logger = structlog.get_logger()

_TRADE_FIELDS = set(Trade.model_fields)


class TradeLoadError(Exception):
    """Raised when a journal file cannot be read or contains an invalid trade."""


def load_trades(path: Path | str) -> list[Trade]:
    """
    Load trades from a journal file, preserving file order.

    Args:
        path: CSV, JSON or YAML file

    Returns:
        List of Trade objects

    Raises:
        TradeLoadError: Missing file, unsupported format, or invalid trade
    """
    path = Path(path)
    if not path.exists():
        raise TradeLoadError(f"Trade file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        rows = _read_csv(path)
    elif suffix == ".json":
        rows = _read_documents(path, json.loads)
    elif suffix in (".yaml", ".yml"):
        rows = _read_documents(path, yaml.safe_load)
    else:
        raise TradeLoadError(f"Unsupported trade file format '{suffix}': {path}")

    trades = [_parse_row(row, row_number) for row_number, row in enumerate(rows, start=1)]

    if not trades:
        logger.warning("trade_loader.empty", path=str(path))
    else:
        open_count = sum(1 for t in trades if t.is_open)
        logger.info("trade_loader.loaded", path=str(path), trades=len(trades), open=open_count)

    return trades


def parse_trade(row: dict[str, Any]) -> Trade:
    """
    Build a Trade from a raw mapping (CSV row or decoded document).

    Raises:
        pydantic.ValidationError: Missing or invalid required fields
    """
    values: dict[str, Any] = {}
    for key, value in row.items():
        if key is None:
            continue
        key = key.strip()
        if key not in _TRADE_FIELDS:
            continue
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
        values[key] = value

    tags = values.get("tags")
    if isinstance(tags, str):
        separator = ";" if ";" in tags else ","
        values["tags"] = [tag.strip() for tag in tags.split(separator) if tag.strip()]

    if isinstance(values.get("direction"), str):
        values["direction"] = values["direction"].lower()

    return Trade(**values)


def _parse_row(row: Any, row_number: int) -> Trade:
    if not isinstance(row, dict):
        raise TradeLoadError(f"Trade #{row_number} is not a mapping: {row!r}")
    try:
        return parse_trade(row)
    except ValidationError as e:
        raise TradeLoadError(f"Invalid trade #{row_number}: {e}") from e


def _read_csv(path: Path) -> list[dict[str, Any]]:
    try:
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    except (UnicodeDecodeError, csv.Error) as e:
        raise TradeLoadError(f"Could not read {path}: {e}") from e


def _read_documents(path: Path, decode) -> list[Any]:
    try:
        document = decode(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise TradeLoadError(f"Could not parse {path}: {e}") from e

    if document is None:
        return []
    if isinstance(document, dict):
        document = document.get("trades", [])
    if not isinstance(document, list):
        raise TradeLoadError(f"Expected a list of trades in {path}")
    return document
