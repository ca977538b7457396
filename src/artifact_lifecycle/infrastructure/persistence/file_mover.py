"""
Staged file operations for file-backed artifacts.

Moves a temporary file into its final location or removes it. Blocking
file-system calls run in the default executor.
"""

import asyncio
import os
import shutil
from pathlib import Path
from typing import Union

from artifact_lifecycle.domain.ports import IEventSink
from artifact_lifecycle.domain.value_objects import LifecycleEvent


PathLike = Union[str, Path]


def _move(source: Path, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.move(str(source), str(destination))


def _remove(path: Path) -> bool:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path, ignore_errors=True)
        return True
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True


async def move_temporary_file(
    sink: IEventSink,
    source: PathLike,
    destination: PathLike,
) -> bool:
    """
    Move a staged temporary file to its final destination.

    Parent directories of the destination are created as needed.

    Args:
        sink: Event sink for MOVE_FILE / MOVE_FILE_MISSING records
        source: Staged temporary file
        destination: Final location

    Returns:
        True if the file was moved, False if the source was already gone

    Raises:
        OSError: If an existing source could not be moved
    """
    source_path = Path(source)
    destination_path = Path(destination)
    loop = asyncio.get_running_loop()

    if await loop.run_in_executor(None, source_path.exists):
        sink.record(
            LifecycleEvent.MOVE_FILE,
            f'moving "{source_path}" to {destination_path}',
            source=str(source_path),
            destination=str(destination_path),
        )
        await loop.run_in_executor(None, _move, source_path, destination_path)
        return True

    sink.record(
        LifecycleEvent.MOVE_FILE_MISSING,
        f"did not find temporary file: {source_path}",
        level="warning",
        source=str(source_path),
    )
    return False


async def remove_temporary_file(sink: IEventSink, path: PathLike) -> bool:
    """
    Remove a staged temporary file or directory.

    A path that no longer exists is not an error; it is recorded as a
    MOVE_FILE_MISSING warning.

    Args:
        sink: Event sink for MOVE_FILE_MISSING records
        path: Staged temporary file

    Returns:
        True if something was removed, False if the path was already gone
    """
    temporary_path = Path(path)
    loop = asyncio.get_running_loop()

    removed = await loop.run_in_executor(None, _remove, temporary_path)
    if not removed:
        sink.record(
            LifecycleEvent.MOVE_FILE_MISSING,
            f"did not find temporary file to remove: {temporary_path}",
            level="warning",
            source=str(temporary_path),
        )
    return removed
