"""Local storage for downloaded images."""

from __future__ import annotations

from pathlib import Path


class ImageStorage:
    """Writes downloaded image bytes under a base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def save_file(self, content: bytes, filename: str) -> Path:
        """Save file content."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        path = self.base_dir / filename
        path.write_bytes(content)
        return path
