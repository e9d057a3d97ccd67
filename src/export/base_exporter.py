# src/export/base_exporter.py — v1
"""Abstract result export interface.

Exporters render a result collection to text; ``export`` writes the file
only when at least one record made it into the output.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from fotocore.core.models import ProcessingResult

logger = logging.getLogger(__name__)


class ExportDocument(BaseModel):
    """Rendered export content plus the number of records it carries."""

    content: str
    count: int
    path: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class BaseExporter(ABC):
    """Unified interface for result export formats."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'csv', 'kml')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.csv', '.kml')."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type offered with the download."""

    @abstractmethod
    def render(self, results: list[ProcessingResult]) -> ExportDocument:
        """Render results; an empty document has count 0 and no content."""

    async def export(
        self, results: list[ProcessingResult], output_path: str | Path,
    ) -> ExportDocument:
        """Render and write to ``output_path``; nothing is written when empty."""
        document = self.render(results)
        if document.is_empty:
            logger.info("Nothing to export as %s", self.format_name)
            return document

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.content, encoding="utf-8", newline="")
        logger.info(
            "Exported %d record(s) as %s to %s", document.count, self.format_name, path,
        )
        return document.model_copy(update={"path": str(path)})
