import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from storysave.narrative import Flowchart  # noqa: E402


class RecordingFlowchart(Flowchart):
    """Flowchart double that records every execute_block call."""

    def __init__(self, name: str = "flowchart") -> None:
        self.name = name
        self.executions = []

    def execute_block(self, block, command_index):
        self.executions.append((block, command_index))


@pytest.fixture()
def flowchart() -> RecordingFlowchart:
    return RecordingFlowchart()


@pytest.fixture()
def make_flowchart():
    return RecordingFlowchart
