import errno
from pathlib import Path
from typing import Optional

from mkxorg.logging import Logger

logger = Logger(__name__)

BACKUP_SUFFIX = ".bak"


class ConfigFileWriter:
    """Write the generated config, keeping one backup of what was there before."""

    def write(self, path: Path, content: str, mode: int = 0o644) -> Optional[Path]:
        self._ensure_parent_dir(path)
        backup = self._rotate_backup(path)
        self._write_content(path, content)
        path.chmod(mode)
        logger.info(f"Wrote file: {path}")
        return backup

    def backup_path(self, path: Path) -> Path:
        return path.with_name(path.name + BACKUP_SUFFIX)

    def _ensure_parent_dir(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

    def _rotate_backup(self, path: Path) -> Optional[Path]:
        if path.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Is a directory", str(path))
        if not path.exists():
            return None
        backup = self.backup_path(path)
        if backup.exists():
            logger.debug(f"Backup already present, leaving it alone: {backup}")
            return None
        path.rename(backup)
        logger.info(f"Saved previous config to {backup}")
        return backup

    def _write_content(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
