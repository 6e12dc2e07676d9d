"""Owner-only file I/O for cached auth tokens.

Token files must never be readable by group or others, not even for the
instant between creation and chmod. Files are therefore created with mode
0o600 at open() time and swapped into place with an atomic rename.
"""

import os
import stat
from pathlib import Path

# Owner read/write only
OWNER_ONLY_MODE: int = stat.S_IRUSR | stat.S_IWUSR  # 0o600


def write_owner_only(path: Path, content: str) -> None:
    """Atomically write ``content`` to ``path`` with 0o600 permissions.

    The data goes to a sibling temp file first, which is then renamed over
    the target, so readers see either the old token or the new one.

    Args:
        path: Destination file.
        content: Text to write (UTF-8 encoded).

    Raises:
        OSError: If the file cannot be created, written or renamed.
    """
    temp_path = path.with_name(f"{path.name}.{os.getpid()}.tmp")
    fd = os.open(
        str(temp_path),
        os.O_CREAT | os.O_TRUNC | os.O_WRONLY,
        OWNER_ONLY_MODE,
    )
    try:
        try:
            os.write(fd, content.encode("utf-8"))
            os.fsync(fd)
        finally:
            os.close(fd)
        os.replace(temp_path, path)
    except OSError:
        if temp_path.exists():
            temp_path.unlink()
        raise

    # umask or the filesystem may have widened the mode
    restrict_to_owner(path)


def restrict_to_owner(path: Path) -> None:
    """Reset permissions of an existing file to 0o600.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    os.chmod(path, OWNER_ONLY_MODE)


def is_owner_only(path: Path) -> bool:
    """Return True if neither group nor others have any access to ``path``."""
    mode = path.stat().st_mode
    return not mode & (stat.S_IRWXG | stat.S_IRWXO)
