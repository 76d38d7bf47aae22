import logging
from pathlib import Path

from sdtgen.errors import ArtifactCreateError, ArtifactWriteError
from sdtgen.system.constants import UnitSuffix


class UnitFileManager:
    """Manages unit file writes on the filesystem.

    Existing files are overwritten. The target directory must already
    exist, it is never created.
    """

    UNIT_FILE_MODE = 0o644

    def __init__(self) -> None:
        """Initialize the unit file manager.
        """
        self._logger = logging.getLogger(__name__)

    def write_unit_file(self, unit_path: Path, content: str) -> Path:
        """Write a single unit file.

        Args:
            unit_path: Full path of the unit file (e.g., '/etc/.../foo.timer')
            content: Content of the unit file

        Returns:
            Path to the written unit file

        Raises:
            ArtifactCreateError: If the file cannot be created
            ArtifactWriteError: If the content cannot be fully written
        """
        kind = unit_path.suffix.removeprefix('.')
        temp_path = unit_path.with_suffix(
            f'{unit_path.suffix}{UnitSuffix.TEMPORARY}'
        )

        try:
            handle = temp_path.open('w', encoding='utf-8')
        except OSError as e:
            self._logger.error(
                'Failed to create unit file %s: %s',
                unit_path,
                e,
                exc_info=True,
            )
            raise ArtifactCreateError(unit_path, kind) from e

        try:
            with handle:
                handle.write(content)
            # The target is only touched by the final rename
            temp_path.chmod(self.UNIT_FILE_MODE)
            temp_path.replace(unit_path)
        except OSError as e:
            self._cleanup_temp_file(temp_path)
            self._logger.error(
                'Failed to write unit file %s: %s',
                unit_path,
                e,
                exc_info=True,
            )
            raise ArtifactWriteError(unit_path, kind) from e

        self._logger.info('Successfully wrote unit file: %s', unit_path)
        return unit_path

    def _cleanup_temp_file(self, temp_path: Path) -> None:
        """Remove a leftover temporary file.
        """
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            self._logger.warning(
                'Failed to remove temporary file %s: %s',
                temp_path,
                e,
            )
