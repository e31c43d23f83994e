import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import checklist_manager
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Common test fixtures
@pytest.fixture
def sign_form_text() -> str:
    """Single mandatory, unchecked item."""
    return (
        '[{"id":"1","name":"Sign form","type":"doc","value":"",'
        '"doctype":"x","mandatory":"yes"}]'
    )


@pytest.fixture
def three_items_text() -> str:
    return (
        '[{"id":"a","name":"First","value":"checked","mandatory":""},'
        '{"id":"b","name":"Second","value":"","mandatory":"  "},'
        '{"id":"c","name":"Third","value":"","mandatory":"no","owner":"ops"}]'
    )


@pytest.fixture
def one_item_text() -> str:
    return '[{"id":"z","name":"Only","value":"","mandatory":""}]'
