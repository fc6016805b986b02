"""JSON file sink for exporting a generation to files."""

import json
import logging
from pathlib import Path
from typing import Any

from cre_mock.exceptions import SinkError
from cre_mock.sinks.serialization import to_dict
from cre_mock.store.cre import Generation

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output data to JSON files, one file per entity collection."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json`` and return its path."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        return file_path

    def write_generation(self, generation: Generation) -> None:
        """Write every collection of a generation (transactions unenriched)."""
        self.write_batch("properties", list(generation.properties.values()))
        self.write_batch("parties", list(generation.parties.values()))
        self.write_batch("brokers", list(generation.brokers.values()))
        self.write_batch("documents", list(generation.documents.values()))
        self.write_batch("transactions", list(generation.transactions))

    @property
    def counts(self) -> dict[str, int]:
        """Records written per entity type."""
        return dict(self._counts)

    def close(self) -> None:
        """Log a summary of what was written."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
