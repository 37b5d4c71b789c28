"""
File Utilities Module
Common file operations and project-relative path handling.
"""

import os
from pathlib import Path, PurePosixPath
from typing import Optional

def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def project_root(cwd: Optional[str | Path] = None) -> Path:
    """Return the project root, defaulting to the current working directory."""
    return normalize_path(cwd if cwd is not None else Path.cwd())

def file_exists(path: str | Path) -> bool:
    """
    Check whether a file or directory exists.

    Absence is a normal outcome and returns False. Any other OS error
    (permission denied, I/O failure) propagates to the caller.
    """
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True

def resolve_project_path(root: Path, relative: str) -> Path:
    """
    Resolve a POSIX-style project-relative path against the project root.

    Args:
        root: Project root directory
        relative: Path such as 'src/lib/utils.ts'

    Returns:
        Absolute Path inside the project root

    Raises:
        ValueError: If the path is empty, absolute, or escapes the root
    """
    if not relative:
        raise ValueError("Project path must not be empty")
    posix = PurePosixPath(relative.replace('\\', '/'))
    if posix.is_absolute() or Path(relative).is_absolute():
        raise ValueError(f"Project path must be relative: {relative}")
    resolved = (root / Path(*posix.parts)).resolve()
    if resolved != root and root not in resolved.parents:
        raise ValueError(f"Project path escapes the project root: {relative}")
    return resolved

def ensure_directory(directory: Path) -> None:
    """Ensure directory exists, create if necessary."""
    directory.mkdir(parents=True, exist_ok=True)

def read_file_content(file_path: Path) -> str:
    """
    Read file content as UTF-8, keeping line endings untouched.

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        return f.read()

def write_file_content(file_path: Path, content: str) -> None:
    """Write content as UTF-8, creating missing parent directories."""
    ensure_directory(file_path.parent)
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
