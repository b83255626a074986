"""
Screenshot Generator Module
Captures full-page screenshots of local templates using Playwright.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Browser, sync_playwright

from utils.file_utils import ensure_directory, to_file_url
from visual.capture_config import DEFAULT_OUTPUT_DIR, CaptureConfig, default_config
from visual.capture_report import (
    CaptureFailure,
    CaptureReport,
    CaptureTask,
    CapturedArtifact,
    plan_tasks,
)
from visual.image_checks import png_dimensions

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

class ScreenshotGenerator:
    """Runs the page x viewport capture plan against a single browser."""

    def __init__(self, config: CaptureConfig):
        self.config = config
        self.browser: Optional[Browser] = None

    def capture_all(self, output_dir: Union[str, Path]) -> CaptureReport:
        """
        Capture every (page, viewport) pair into output_dir.

        Tasks run one at a time, each in its own browser context. The first
        failing task stops the run; it is recorded in the report together
        with the tasks that were not attempted. Browser launch failures and
        an uncreatable output directory propagate to the caller.
        """
        output_dir = Path(output_dir)
        report = CaptureReport(output_dir=output_dir)
        self.config.export_browsers_path()

        with sync_playwright() as p:
            logger.debug("Launching chromium")
            self.browser = p.chromium.launch()
            try:
                ensure_directory(output_dir)
                tasks = plan_tasks(self.config, output_dir)
                logger.debug(f"Planned {len(tasks)} captures into {output_dir}")

                for index, task in enumerate(tasks):
                    try:
                        report.succeeded.append(self.capture_screenshot(task))
                    except Exception as e:
                        logger.debug(f"Failed to capture {task.label}: {e}", exc_info=True)
                        report.failure = CaptureFailure(task=task, error=e)
                        report.skipped = tasks[index + 1:]
                        break
            finally:
                try:
                    self.browser.close()
                except Exception as e:
                    logger.debug(f"Closing browser failed: {e}", exc_info=True)
                self.browser = None

        if report.ok:
            logger.info("All screenshots captured!")
        else:
            logger.info(f"Stopped after {len(report.succeeded)} captures, "
                        f"{len(report.skipped)} skipped")
        return report

    def capture_screenshot(self, task: CaptureTask) -> CapturedArtifact:
        """Capture one page at one viewport in a fresh browser context."""
        if self.browser is None:
            raise RuntimeError("Browser is not running")

        url = to_file_url(self.config.base_dir, task.page.path)
        context = self.browser.new_context(viewport=task.viewport.as_playwright())
        try:
            page = context.new_page()
            logger.debug(f"Loading {url} at {task.viewport.width}x{task.viewport.height}")
            page.goto(url, wait_until=self.config.wait_until,
                      timeout=self.config.navigation_timeout_ms)

            # Wait for animations to settle
            page.wait_for_timeout(self.config.settle_delay_ms)

            page.screenshot(path=str(task.output_path), full_page=self.config.full_page)
        finally:
            context.close()

        size = png_dimensions(task.output_path)
        logger.info(f"Captured: {task.output_path}")
        logger.debug(f"{task.output_path} is {size[0]}x{size[1]}")
        return CapturedArtifact(task=task, path=task.output_path, size=size)

def capture_screenshots(output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
                        config: Optional[CaptureConfig] = None) -> CaptureReport:
    """Capture the configured pages, defaulting to the project's own index and about pages."""
    if config is None:
        config = default_config(PROJECT_ROOT)
    return ScreenshotGenerator(config).capture_all(output_dir)
