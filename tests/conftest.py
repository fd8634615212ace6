"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Snapshot testing fixture for rendered output.
- Fresh collaborators (import manager, identifier recorder) per test.
- Helpers for building spans over a fake template file.
"""

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add src to path so we can import 'ir_lowering' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ir_lowering.core.imports import DefaultImportTracker, ImportManager  # noqa: E402
from ir_lowering.ir.spans import ParseSourceFile, span_of  # noqa: E402


class SnapshotAssert:
  """
  Compares rendered output against a stored file under `__snapshots__/`.
  """

  def __init__(self, request: pytest.FixtureRequest):
    self.request = request
    self.test_name = request.node.name
    self.module_path = Path(request.node.path).parent
    self.snapshot_dir = self.module_path / "__snapshots__"
    self.update_mode = request.config.getoption("--update-snapshots", default=False)

  def assert_match(self, content: str, extension: str = "js", normalizer: Optional[Callable[[str], str]] = None):
    """
    Compares content against stored file.

    Args:
        content: The actual output string.
        extension: File extension (default 'js').
        normalizer: Optional function to clean both content and expected string before comparison.
    """
    snapshot_file = self.snapshot_dir / f"{self.test_name}.{extension}"
    content = content.replace("\r\n", "\n")

    if self.update_mode or not snapshot_file.exists():
      self.snapshot_dir.mkdir(parents=True, exist_ok=True)
      snapshot_file.write_text(normalizer(content) if normalizer else content, encoding="utf-8")
      if self.update_mode:
        return

    expected = snapshot_file.read_text(encoding="utf-8").replace("\r\n", "\n")

    lhs, rhs = content, expected
    if normalizer:
      lhs, rhs = normalizer(lhs), normalizer(rhs)

    assert lhs == rhs, (
      f"Snapshot mismatch for {snapshot_file.name}. Run pytest with --update-snapshots to accept changes."
    )


@pytest.fixture
def snapshot(request):
  """Fixture to assert text matches a stored snapshot."""
  return SnapshotAssert(request)


@pytest.fixture
def imports():
  """A fresh import manager allocating i0, i1, ..."""
  return ImportManager()


@pytest.fixture
def recorder():
  """A fresh identifier-usage recorder."""
  return DefaultImportTracker()


@pytest.fixture
def template_file():
  """A fake originating file used for source span tests."""
  return ParseSourceFile(content="<p i18n>Hello {{ name }}!</p>\n<b>{{ count }}</b>\n", url="app.component.html")


@pytest.fixture
def make_span(template_file):
  """Builds spans over `template_file` by offset."""

  def _make(start: int, end: int, file: Optional[ParseSourceFile] = None):
    return span_of(file or template_file, start, end)

  return _make


def pytest_addoption(parser):
  """Add CLI flag to update snapshots."""
  parser.addoption("--update-snapshots", action="store_true", default=False, help="Update snapshots for visual tests")
