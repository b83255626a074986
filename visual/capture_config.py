"""
Capture Configuration Module
Viewports, page descriptors and run settings passed into the capture driver.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

DEFAULT_OUTPUT_DIR = './screenshots-baseline'
NAVIGATION_TIMEOUT_MS = 30000
SETTLE_DELAY_MS = 2000
BROWSERS_PATH_ENV = 'PLAYWRIGHT_BROWSERS_PATH'


def _check_name(kind: str, name: str) -> None:
    if not name or not name.strip():
        raise ValueError(f"{kind} name must not be empty")
    if '/' in name or '\\' in name:
        raise ValueError(f"{kind} name must not contain path separators: {name!r}")


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport size must be positive, got {self.width}x{self.height}")

    def as_playwright(self) -> Dict[str, int]:
        """Viewport in the shape Browser.new_context expects."""
        return {'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class PageDescriptor:
    name: str
    path: str

    def __post_init__(self):
        _check_name('Page', self.name)
        if not self.path:
            raise ValueError(f"Page {self.name!r} has no path")


DEFAULT_VIEWPORTS: Dict[str, Viewport] = {
    'desktop': Viewport(1440, 900),
    'tablet': Viewport(768, 1024),
    'mobile': Viewport(375, 812),
}

DEFAULT_PAGES: List[PageDescriptor] = [
    PageDescriptor('index', 'index.html'),
    PageDescriptor('about', 'about.html'),
]


@dataclass
class CaptureConfig:
    """
    Everything the capture driver needs besides the output directory.

    Viewports are iterated in insertion order, pages in list order.
    `base_dir` is the directory page paths are resolved against.
    """
    base_dir: Path
    viewports: Dict[str, Viewport] = field(default_factory=lambda: dict(DEFAULT_VIEWPORTS))
    pages: List[PageDescriptor] = field(default_factory=lambda: list(DEFAULT_PAGES))
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    settle_delay_ms: int = SETTLE_DELAY_MS
    wait_until: str = 'networkidle'
    full_page: bool = True
    browsers_path: Optional[Path] = None

    def __post_init__(self):
        self.base_dir = Path(self.base_dir)
        if not self.viewports:
            raise ValueError("At least one viewport is required")
        if not self.pages:
            raise ValueError("At least one page is required")
        for name in self.viewports:
            _check_name('Viewport', name)
        names = [page.name for page in self.pages]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate page names: {', '.join(duplicates)}")
        if self.navigation_timeout_ms <= 0:
            raise ValueError("navigation_timeout_ms must be positive")
        if self.settle_delay_ms < 0:
            raise ValueError("settle_delay_ms must not be negative")

    @staticmethod
    def artifact_name(page_name: str, viewport_name: str) -> str:
        return f"{page_name}-{viewport_name}.png"

    def export_browsers_path(self) -> None:
        """Point Playwright at the browser cache unless the environment already does."""
        if self.browsers_path is not None:
            os.environ.setdefault(BROWSERS_PATH_ENV, str(self.browsers_path))


def default_config(base_dir: Union[str, Path]) -> CaptureConfig:
    """The fixed page and viewport lists, resolved against base_dir."""
    return CaptureConfig(base_dir=Path(base_dir))
