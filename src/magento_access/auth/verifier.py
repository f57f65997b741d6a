"""Out-of-band verifier code handoff.

The store owner approves access in a browser; the verifier code Magento
shows afterwards is written to a shared location (by hand, a helper
script, or ``magento-cli auth verifier``) and the authorization flow
polls that location until it appears.
"""

import csv
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

VERIFIER_COLUMN = "VerifierCode"


def _get_verifier_path() -> Path:
    """Get default verifier file path."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / "magento-access" / "verifier.csv"


@runtime_checkable
class VerifierSource(Protocol):
    """Where the authorization flow reads the verifier code from."""

    def read(self) -> str | None:
        """Return the verifier if one has been written, else None or ''."""
        ...

    def clear(self) -> None:
        """Drop any previously written verifier."""
        ...


class FileVerifierSource:
    """Verifier stored in a one-column CSV file with a ``VerifierCode`` header."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or _get_verifier_path()

    def read(self) -> str | None:
        """Read the verifier from the first data row.

        Raises:
            OSError: If the file is missing or unreadable
        """
        with self.path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for row in reader:
                value = (row.get(VERIFIER_COLUMN) or "").strip()
                return value or None
        return None

    def save(self, verifier: str) -> None:
        """Write ``verifier`` as the only data row."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=[VERIFIER_COLUMN])
            writer.writeheader()
            writer.writerow({VERIFIER_COLUMN: verifier.strip()})
        logger.debug("Wrote verifier code to %s", self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
