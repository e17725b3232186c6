import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, root):
        self.root = Path(root)

    def get_markdown_content(self, doc: dict) -> str:
        """Get the full markdown content from a document (decoded as text)."""
        raw = self._get_raw_content(doc)
        if isinstance(raw, bytes):
            # utf-8-sig drops a leading BOM
            return raw.decode("utf-8-sig", errors="replace")
        return raw or ""

    def get_binary_content(self, doc: dict) -> bytes | None:
        """Get binary content from a document."""
        return self._get_raw_content(doc)

    def _get_raw_content(self, doc: dict) -> bytes | None:
        """Read the file behind a document, refusing paths outside the root."""
        relative = doc.get("path") or doc.get("_id")
        if not relative:
            return None

        root = self.root.resolve()
        target = (root / relative).resolve()
        if not target.is_relative_to(root):
            logger.warning(f"Refusing to read {relative}: outside {root}")
            return None

        try:
            return target.read_bytes()
        except FileNotFoundError:
            return None
        except IsADirectoryError:
            return None
        except OSError as e:
            logger.error(f"Error reading {relative}: {e}")
            return None
