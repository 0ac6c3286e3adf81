"""
Extension filter for jarsearch.

Decides which file names are eligible for content search. The same policy
applies to files on disk and to members inside archives.
"""

from typing import Iterable

from ..models.config import TARGET_EXTENSIONS, ARCHIVE_EXTENSIONS


def get_file_extension(name: str) -> str:
    """
    Get the lowercase extension of a file name, including the dot.

    Only the last path component is considered, so archive member names such
    as ``pkg/Config.class`` work too. A name without a dot, or whose only dot
    is its first or last character, has no extension. For that reason a
    member such as ``meta/.class`` is a dotfile and is not searched.

    Args:
        name: File name or path

    Returns:
        Extension such as '.class', or an empty string
    """
    name = name.replace('\\', '/').rsplit('/', 1)[-1].lower()
    last_dot = name.rfind('.')
    if 0 < last_dot < len(name) - 1:
        return name[last_dot:]
    return ""


def is_target_file(name: str, extensions: Iterable[str] = TARGET_EXTENSIONS) -> bool:
    """Check whether a file or member name has one of the target extensions."""
    return get_file_extension(name) in extensions


def is_archive(name: str, archive_extensions: Iterable[str] = ARCHIVE_EXTENSIONS) -> bool:
    """Check whether a file name should be opened as an archive."""
    return get_file_extension(name) in archive_extensions
