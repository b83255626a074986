"""
Capture Report Module
Ordered task plan for a capture run and the outcome of executing it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from visual.capture_config import CaptureConfig, PageDescriptor, Viewport

@dataclass(frozen=True)
class CaptureTask:
    page: PageDescriptor
    viewport_name: str
    viewport: Viewport
    output_path: Path

    @property
    def label(self) -> str:
        return f"{self.page.name}-{self.viewport_name}"

@dataclass
class CapturedArtifact:
    task: CaptureTask
    path: Path
    size: Tuple[int, int]

@dataclass
class CaptureFailure:
    task: CaptureTask
    error: BaseException

def plan_tasks(config: CaptureConfig, output_dir: Path) -> List[CaptureTask]:
    """Cross product of pages (outer) and viewports (inner)."""
    output_dir = Path(output_dir)
    return [
        CaptureTask(
            page=page,
            viewport_name=viewport_name,
            viewport=viewport,
            output_path=output_dir / config.artifact_name(page.name, viewport_name),
        )
        for page in config.pages
        for viewport_name, viewport in config.viewports.items()
    ]

@dataclass
class CaptureReport:
    output_dir: Path
    succeeded: List[CapturedArtifact] = field(default_factory=list)
    failure: Optional[CaptureFailure] = None
    skipped: List[CaptureTask] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        """Re-raise the exception that stopped the run, if any."""
        if self.failure is not None:
            raise self.failure.error

    def to_dict(self) -> Dict:
        """JSON-serialisable summary of the run."""
        return {
            'output_dir': str(self.output_dir),
            'ok': self.ok,
            'succeeded': [
                {
                    'page': artifact.task.page.name,
                    'viewport': artifact.task.viewport_name,
                    'path': str(artifact.path),
                    'width': artifact.size[0],
                    'height': artifact.size[1],
                }
                for artifact in self.succeeded
            ],
            'failure': None if self.failure is None else {
                'page': self.failure.task.page.name,
                'viewport': self.failure.task.viewport_name,
                'error': f"{type(self.failure.error).__name__}: {self.failure.error}",
            },
            'skipped': [task.label for task in self.skipped],
        }
