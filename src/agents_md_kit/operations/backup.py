"""Backup of the root config document before it is overwritten."""

import logging
from pathlib import Path

from agents_md_kit.integrations.time import Time

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def backup_path_for(path: Path, time: Time) -> Path:
    """Return the sibling backup path ``<name>.bak.<YYYYMMDDHHMMSS>``."""
    stamp = time.now().strftime(BACKUP_TIMESTAMP_FORMAT)
    return path.with_name(f"{path.name}.bak.{stamp}")


def backup_existing_config(path: Path, time: Time) -> Path | None:
    """Rename an existing config document out of the way.

    Args:
        path: Destination path of the config document
        time: Clock used for the backup suffix

    Returns:
        The backup path, or None if nothing existed at path

    Note:
        Renames rather than copies, so after this returns nothing exists at
        path until the new document is written. Two runs within the same
        second produce the same backup name; the later rename replaces the
        earlier backup.
    """
    if not path.is_file():
        return None

    backup = backup_path_for(path, time)
    path.rename(backup)
    logger.debug("Backed up %s -> %s", path, backup)
    return backup
