"""
Sound Library for the timer command.

The library is the set of files stored in the sounds configuration directory;
there is no index file, the directory listing is the index. Each file is
registered under its name without the extension, so ``Alien.mp3`` becomes the
sound ``Alien``.

The name to path mapping is built once, when the library is constructed.
``add`` and ``delete`` only touch the file system, so a library instance keeps
showing the state it saw at start-up until it is constructed again.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

from halo import Halo

from timer.errors import ConfigDirectoryError, SoundFileIOError, SoundNotFound
from timer.utils import get_logger

logger: logging.Logger = get_logger(__name__)


class SoundLibrary:
    """Name to file mapping over the sounds configuration directory."""

    def __init__(self, folder: Path) -> None:
        self.folder = Path(folder)
        self._ensure_folder()
        self._sounds: dict[str, Path] = self._scan()

    def _ensure_folder(self) -> None:
        try:
            self.folder.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise ConfigDirectoryError(
                f"Error creating sounds directory {self.folder}: {err}"
            ) from err

    def _scan(self) -> dict[str, Path]:
        sounds: dict[str, Path] = {}
        try:
            entries = list(self.folder.iterdir())
        except OSError as err:
            raise ConfigDirectoryError(
                f"Error reading list of sounds in {self.folder}: {err}"
            ) from err

        for entry in entries:
            if not entry.is_file():
                continue
            sounds[entry.stem] = entry.absolute()
        logger.debug(msg=f"Loaded {len(sounds)} sound(s) from {self.folder}")
        return sounds

    def __contains__(self, name: object) -> bool:
        return name in self._sounds

    def __len__(self) -> int:
        return len(self._sounds)

    def lookup(self, name: str) -> Optional[Path]:
        """Returns the file registered under ``name``, or None."""
        return self._sounds.get(name)

    def names(self) -> Iterator[str]:
        """Yields registered sound names in directory order."""
        return iter(self._sounds)

    def add(self, source: str | Path) -> Path:
        """
        Copies a sound file into the library directory.

        Arguments:
            source (str | Path): File to add; its base name becomes the
                stored file name.

        Returns:
            Path: Location of the copy.

        Raises:
            SoundFileIOError: If the source cannot be read or the copy
                cannot be written.
        """
        source = Path(source)
        destination = self.folder / source.name
        try:
            data = source.read_bytes()
        except OSError as err:
            raise SoundFileIOError(f"Error reading sound file {source}: {err}") from err

        with Halo(
            text=f"Adding {source.name} to the sound library",
            spinner="dots",
            text_color="green",
        ):
            try:
                destination.write_bytes(data)
            except OSError as err:
                raise SoundFileIOError(
                    f"Error writing sound file {destination}: {err}"
                ) from err

        logger.info(msg=f"Sound {destination.stem!r} added to {self.folder}")
        return destination

    def delete(self, name: str) -> Path:
        """
        Removes the file registered under ``name``.

        Raises:
            SoundNotFound: If no sound has that name; nothing is removed.
            SoundFileIOError: If the file cannot be removed.
        """
        location = self.lookup(name)
        if location is None:
            raise SoundNotFound(f"Sound {name!r} not found in {self.folder}")
        try:
            location.unlink()
        except OSError as err:
            raise SoundFileIOError(
                f"Unable to remove sound {name!r} at {location}: {err}"
            ) from err

        logger.info(msg=f"Sound {name!r} removed from {self.folder}")
        return location
