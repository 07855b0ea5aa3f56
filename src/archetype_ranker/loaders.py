"""
Model loader for archetype and profile files.

Supports importing from:
- CSV files
- JSON files

CSV Format:
    name,openness,conscientiousness,extraversion
    Explorer,0.9,0.3,0.6
    Guardian,0.2,0.9,0.4

JSON Format:
    [
        {
            "name": "Explorer",
            "facets": {"openness": 0.9, "conscientiousness": 0.3, "extraversion": 0.6}
        },
        ...
    ]

Loading is all-or-nothing: a malformed record, a facet schema mismatch
within the batch or a zero vector aborts the whole load. Every entity
handed back has already been normalized.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from .core.errors import ArchetypeError, FacetKeyMismatchError, MalformedRecordError
from .core.models import EntityRecord
from .core.types import NAME_KEY, ModelFormat
from .vectors import VectorEntity

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[EntityRecord])


@dataclass
class LoadResult:
    """
    Outcome of a load attempt.

    Either `entities` holds the full normalized batch and `error` is None,
    or `error` holds the reason and `entities` is empty.
    """

    entities: list[VectorEntity] = field(default_factory=list)
    error: Optional[ArchetypeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# Raw Record Readers
# =============================================================================


def _check_path(file_path: str | Path) -> Path:
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Model file not found: {file_path}")
    return file_path


def read_csv_records(file_path: str | Path) -> list[dict[str, str]]:
    """
    Read a CSV model file into raw string records.

    Args:
        file_path: Path to CSV file with a header row

    Returns:
        One {column: raw value} dict per data row

    Raises:
        MalformedRecordError: If the file is not UTF-8 CSV or a row is too long
    """
    file_path = _check_path(file_path)
    records = []
    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        try:
            for row in reader:
                if None in row:
                    raise MalformedRecordError(
                        f"row {reader.line_num} has more values than header columns"
                    )
                records.append({k.strip(): v for k, v in row.items()})
        except (UnicodeDecodeError, csv.Error) as e:
            raise MalformedRecordError(
                f"unreadable CSV in {file_path} near line {reader.line_num + 1}: {e}",
                record_index=len(records),
            ) from e
    return records


def read_json_records(file_path: str | Path) -> list[dict[str, Any]]:
    """
    Read a JSON model file into raw records.

    Each JSON entity is flattened to {NAME_KEY: name, facet: value, ...} so
    both formats feed the same record-to-entity path.

    Raises:
        MalformedRecordError: If the file is not valid JSON in the model shape
    """
    file_path = _check_path(file_path)
    try:
        entries = _RECORDS_ADAPTER.validate_json(file_path.read_bytes())
    except ValidationError as e:
        raise MalformedRecordError(f"invalid JSON model {file_path}: {e}") from e

    records = []
    for entry in entries:
        if NAME_KEY in entry.facets:
            raise MalformedRecordError(
                f"facet name {NAME_KEY!r} is reserved (entity {entry.name!r})"
            )
        records.append({NAME_KEY: entry.name, **entry.facets})
    return records


def read_records(
    file_path: str | Path,
    model_format: ModelFormat | str | None = None,
) -> list[dict[str, Any]]:
    """Read raw records in the given (or suffix-inferred) format."""
    fmt = ModelFormat(model_format) if model_format else ModelFormat.from_path(file_path)
    if fmt is ModelFormat.CSV:
        return read_csv_records(file_path)
    return read_json_records(file_path)


# =============================================================================
# Records -> Entities
# =============================================================================


def entities_from_records(
    records: Iterable[Mapping[str, Any]],
    name_key: str = NAME_KEY,
) -> list[VectorEntity]:
    """
    Turn raw records into (unnormalized) vector entities.

    The name_key field names the entity; every other field is a facet
    weight parsed as a float.

    Raises:
        MalformedRecordError: On a missing/empty name or an unparsable weight
    """
    entities = []
    for index, record in enumerate(records):
        record = dict(record)
        name = record.pop(name_key, None)
        if name is None or not str(name).strip():
            raise MalformedRecordError(f"missing {name_key!r} value", record_index=index)
        try:
            entities.append(VectorEntity(name=str(name).strip(), facets=record))
        except MalformedRecordError as e:
            raise MalformedRecordError(e.message, record_index=index) from e
    return entities


def check_facet_schema(entities: Iterable[VectorEntity]) -> None:
    """
    Ensure every entity in a batch carries the same facet key set.

    Raises:
        FacetKeyMismatchError: On the first entity deviating from the first one
    """
    first: VectorEntity | None = None
    for entity in entities:
        if first is None:
            first = entity
        elif entity.facet_names != first.facet_names:
            raise FacetKeyMismatchError(
                first.name,
                entity.name,
                missing=first.facet_names - entity.facet_names,
                extra=entity.facet_names - first.facet_names,
            )


def load_entities(
    file_path: str | Path,
    model_format: ModelFormat | str | None = None,
    normalize: bool = True,
) -> list[VectorEntity]:
    """
    Load a model file into a batch of vector entities.

    Args:
        file_path: CSV or JSON model file
        model_format: Explicit format; inferred from the suffix when None
        normalize: Normalize each entity (required before classification)

    Returns:
        All entities in file order

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedRecordError: On any unparsable record
        FacetKeyMismatchError: If the batch mixes facet schemas
        ZeroMagnitudeVectorError: If an entity is an all-zero vector
    """
    records = read_records(file_path, model_format)
    entities = entities_from_records(records)
    check_facet_schema(entities)

    if normalize:
        for entity in entities:
            entity.normalize()

    logger.info("Loaded %d entities from %s", len(entities), file_path)
    return entities


def try_load_entities(
    file_path: str | Path,
    model_format: ModelFormat | str | None = None,
    normalize: bool = True,
) -> LoadResult:
    """
    Load a model file, reporting data errors as a LoadResult.

    A missing file is still raised; only data errors become outcomes.
    """
    try:
        return LoadResult(entities=load_entities(file_path, model_format, normalize))
    except ArchetypeError as e:
        logger.warning("Failed to load %s: %s", file_path, e.message)
        return LoadResult(error=e)


# =============================================================================
# CSV -> JSON Conversion
# =============================================================================


def records_to_json(
    records: Iterable[Mapping[str, Any]],
    name_key: str = NAME_KEY,
) -> list[dict[str, Any]]:
    """
    Convert raw records to the JSON model shape.

    Columns whose value does not parse as a number are dropped from that
    entity with a warning; weights are written as given, not normalized.
    """
    entries = []
    for index, record in enumerate(records):
        if not record.get(name_key):
            raise MalformedRecordError(f"missing {name_key!r} value", record_index=index)
        name = record[name_key]
        facets: dict[str, float] = {}
        for attribute, value in record.items():
            if attribute == name_key:
                continue
            try:
                facets[attribute] = float(value)
            except (TypeError, ValueError):
                logger.warning("Dropping non-numeric facet %s=%r of %s", attribute, value, name)
        entries.append({"name": name, "facets": facets})
    return entries


def convert_csv_to_json(
    src: str | Path,
    dest: str | Path,
    indent: int | None = 2,
) -> int:
    """
    Write a CSV model file out in the JSON model format.

    Returns:
        Number of entities written
    """
    entries = records_to_json(read_csv_records(src))
    Path(dest).write_text(json.dumps(entries, indent=indent) + "\n", encoding="utf-8")
    logger.info("Converted %d entities from %s to %s", len(entries), src, dest)
    return len(entries)
