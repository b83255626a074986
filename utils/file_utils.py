"""
File Utilities Module
Path handling shared by the capture driver and the CLI.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def ensure_directory(directory: str | Path) -> Path:
    """Ensure directory exists, create if necessary (parents included)."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory

def to_file_url(base_dir: str | Path, relative_path: str | Path) -> str:
    """
    Resolve a page path against a base directory and return its file:// URL.

    Args:
        base_dir: Directory the relative path is resolved against
        relative_path: Path of the HTML file, relative to base_dir

    Returns:
        Absolute file:// URL for the page

    Raises:
        FileNotFoundError: If the resolved file doesn't exist
    """
    file_path = normalize_path(Path(base_dir) / relative_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Page file not found: {file_path}")
    return file_path.as_uri()
