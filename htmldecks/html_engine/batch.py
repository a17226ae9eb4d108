"""Batch rendering: many deck records into a directory of HTML files.

Each item is validated, rendered and written independently, so one bad
record (or a failed write) never stops the rest of the batch.
"""

import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, Field, ValidationError

from htmldecks.html_engine.document import render
from htmldecks.schemas.slide_schema import DeckDescription
from htmldecks.schemas.theme_schema import ThemeDescriptor
from htmldecks.utils.file_utils import deck_filename, ensure_directory, save_text

logger = logging.getLogger(__name__)


class BatchFailure(BaseModel):
    """One item that could not be rendered or written."""

    index: int
    label: str = ""
    error: str


class BatchResult(BaseModel):
    """Outcome of a batch run."""

    written: list[Path] = Field(default_factory=list)
    failures: list[BatchFailure] = Field(default_factory=list)

    @property
    def written_count(self) -> int:
        return len(self.written)

    @property
    def ok(self) -> bool:
        return not self.failures


def _label(item: Any) -> str:
    if isinstance(item, DeckDescription):
        return item.company_name
    if isinstance(item, dict):
        return str(item.get("companyName") or item.get("company_name") or "")
    return ""


def _unique_target(target: Path, seen: set[Path]) -> Path:
    if target not in seen:
        return target
    n = 2
    while True:
        candidate = target.with_name(f"{target.stem}-{n}{target.suffix}")
        if candidate not in seen:
            logger.warning(f"{target.name} already written in this batch, using {candidate.name}")
            return candidate
        n += 1


def build_decks(
    items: Iterable[Any],
    theme: ThemeDescriptor,
    output_dir: str | Path,
) -> BatchResult:
    """Render every deck record in ``items`` into ``output_dir``.

    Items may be DeckDescription instances or raw mappings. Files are named
    with deck_filename(); a later deck whose name is already taken in this
    batch gets a numeric suffix ("acme-plain-2.html") so no file is
    overwritten.
    """
    output_dir = ensure_directory(output_dir)
    result = BatchResult()
    seen: set[Path] = set()

    for index, item in enumerate(items):
        label = _label(item)
        try:
            deck = item if isinstance(item, DeckDescription) else DeckDescription.model_validate(item)
            html = render(deck, theme)
            target = _unique_target(output_dir / deck_filename(deck.company_name, theme.id), seen)
            save_text(html, target)
        except ValidationError as e:
            logger.warning(f"Item {index} ({label or 'unnamed'}) is not a valid deck: {e.error_count()} error(s)")
            result.failures.append(BatchFailure(index=index, label=label, error=str(e)))
            continue
        except OSError as e:
            logger.error(f"Item {index} ({label or 'unnamed'}) could not be written: {e}")
            result.failures.append(BatchFailure(index=index, label=label, error=str(e)))
            continue

        seen.add(target)
        result.written.append(target)
        logger.info(f"Wrote {target}")

    logger.info(f"Batch complete: {result.written_count} written, {len(result.failures)} failed")
    return result
