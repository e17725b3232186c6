from pathlib import Path
from typing import List, Optional

from app.settings import normalize_prefix, settings


class FilesystemPostsRepo:
    def __init__(self, content_dir, prefix: str | None = None):
        self.root = Path(content_dir)
        if prefix is None:
            prefix = settings.BLOG_PREFIX
        self.prefix = normalize_prefix(prefix)

    def list_blog_docs(self) -> List[dict]:
        blog_dir = self.root / self.prefix
        if not blog_dir.is_dir():
            return []
        docs = []
        for path in sorted(blog_dir.rglob("*.md")):
            if not path.is_file() or self._is_hidden(path.relative_to(blog_dir)):
                continue
            relative = path.relative_to(self.root).as_posix()
            docs.append({"_id": relative, "path": relative})
        return docs

    def get_blog_doc(self, slug: str) -> Optional[dict]:
        doc_id = f"{self.prefix}{slug}.md"
        for doc in self.list_blog_docs():
            if doc.get("_id") == doc_id:
                return doc
        return None

    def slug_for(self, doc: dict) -> str:
        return doc.get("path", "").removeprefix(self.prefix).removesuffix(".md")

    @staticmethod
    def _is_hidden(relative: Path) -> bool:
        return any(part.startswith((".", "_")) for part in relative.parts)
