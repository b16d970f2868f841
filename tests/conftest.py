import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def sample_chart_path() -> Path:
    from family_chart.utils import mock_file_path

    return mock_file_path("sample_chart.txt")


@pytest.fixture
def sample_chart_text(sample_chart_path: Path) -> str:
    return sample_chart_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_family(sample_chart_text: str):
    from family_chart import parse_family_tree

    return parse_family_tree(sample_chart_text)
