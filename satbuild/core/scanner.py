# SPDX-License-Identifier: MIT
"""Source tree scanning.

Discovers the files that belong to a project. A scan never fails because
part of the tree is unreadable: the offending directory or entry is skipped,
logged, and reported in the result's warnings.

Ordering: for each directory, every subdirectory is scanned completely
(depth-first) before the directory's own files are listed. Entries within
a directory are visited in name order so repeated scans of the same tree
give the same list.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satbuild.core.project_info import ProjectInfo

logger = logging.getLogger(__name__)

# Directory-name markers for FilterMode.SOURCE_DIRECTORIES.
SOURCE_DIR_MARKER = "src"
EXCLUDED_DIR_MARKER = "Source"

SOURCE_EXTENSIONS: frozenset[str] = frozenset(
    [".c", ".cc", ".cpp", ".cxx", ".h", ".hpp", ".inl"]
)


class FilterMode(Enum):
    NONE = "none"
    EXTENSION = "extension"
    SOURCE_DIRECTORIES = "source-directories"


@dataclass(frozen=True)
class ScanWarning:
    """A path that could not be read during a scan.

    Attributes:
        path: The skipped directory or entry.
        message: The underlying OS error text.
    """

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ScanResult:
    """Files found by a scan plus the non-fatal problems met on the way."""

    files: list[Path] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def is_source_directory(name: str) -> bool:
    """Return True if a directory name marks a source directory.

    Matches names ending in "src", except those ending in "Source".
    """
    return name.endswith(SOURCE_DIR_MARKER) and not name.endswith(EXCLUDED_DIR_MARKER)


def scan(
    root: Path | str,
    mode: FilterMode = FilterMode.NONE,
    extension: str | None = None,
) -> ScanResult:
    """Enumerate files under ``root``.

    Args:
        root: Directory to scan.
        mode: NONE lists every file recursively. EXTENSION lists only the
            direct children of ``root`` whose suffix equals ``extension``.
            SOURCE_DIRECTORIES recurses like NONE but, at every level, only
            enters subdirectories named like source directories.
        extension: Suffix including the dot (e.g. ".cpp"), for EXTENSION.

    Returns:
        ScanResult with files in traversal order and any warnings.

    Raises:
        ValueError: If EXTENSION is requested without an extension.
    """
    root_path = Path(root).absolute()
    result = ScanResult()

    if mode is FilterMode.EXTENSION:
        if not extension:
            raise ValueError("an extension is required for FilterMode.EXTENSION")
        _collect_direct_files(root_path, result, extension)
    elif mode is FilterMode.SOURCE_DIRECTORIES:
        _walk(root_path, result, source_only=True)
    else:
        _walk(root_path, result, source_only=False)

    logger.debug(
        "Scanned %s (%s): %d files, %d warnings",
        root_path,
        mode.value,
        len(result.files),
        len(result.warnings),
    )
    return result


def find_sources(project: ProjectInfo) -> ScanResult:
    """Find the compilable and header files of a project.

    The source-directory rule picks the top-level source directories of
    the project (e.g. ``src``); unlike SOURCE_DIRECTORIES mode, each of
    those is then scanned in full, so nested module folders such as
    ``src/Game/Core`` are found. Only files with a C/C++ source or header
    extension are kept.
    """
    root = Path(project.source_dir).absolute()
    result = ScanResult()
    _walk(root, result, source_only=True, whole_source_dirs=True)
    result.files = [f for f in result.files if f.suffix in SOURCE_EXTENSIONS]
    return result


def _skip(result: ScanResult, path: Path, message: str) -> None:
    logger.warning("Skipping unreadable path %s: %s", path, message)
    result.warnings.append(ScanWarning(path, message))


def _warn(result: ScanResult, path: Path, error: OSError) -> None:
    _skip(result, path, error.strerror or str(error))


def _list_dir(
    directory: Path, result: ScanResult
) -> tuple[list[Path], list[Path]] | None:
    """Return (subdirectories, files) of a directory, sorted by name.

    Symlinks are followed. Returns None, after recording a warning, if the
    directory can't be read. Entries whose type can't be determined and
    dangling symlinks are skipped with a warning.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        _warn(result, directory, e)
        return None

    dirs: list[Path] = []
    files: list[Path] = []
    for entry in entries:
        path = directory / entry.name
        try:
            if entry.is_dir():
                dirs.append(path)
            elif entry.is_file():
                files.append(path)
            elif entry.is_symlink():
                _skip(result, path, "dangling symbolic link")
        except OSError as e:
            _warn(result, path, e)
    return dirs, files


def _walk(
    directory: Path,
    result: ScanResult,
    source_only: bool,
    whole_source_dirs: bool = False,
    ancestors: frozenset[tuple[int, int]] = frozenset(),
) -> None:
    """Scan ``directory`` depth-first, subdirectories before its own files.

    ``ancestors`` holds the (device, inode) of every directory on the
    current path; a directory reached again through a symlink is skipped
    with a warning.
    """
    try:
        st = os.stat(directory)
    except OSError as e:
        _warn(result, directory, e)
        return
    key = (st.st_dev, st.st_ino)
    if key in ancestors:
        _skip(result, directory, "symbolic link cycle")
        return
    ancestors = ancestors | {key}

    listing = _list_dir(directory, result)
    if listing is None:
        return
    dirs, files = listing

    for sub in dirs:
        if source_only and not is_source_directory(sub.name):
            continue
        _walk(
            sub,
            result,
            source_only and not whole_source_dirs,
            whole_source_dirs,
            ancestors,
        )

    result.files.extend(files)


def _collect_direct_files(directory: Path, result: ScanResult, extension: str) -> None:
    listing = _list_dir(directory, result)
    if listing is None:
        return
    _, files = listing
    result.files.extend(f for f in files if f.suffix == extension)
