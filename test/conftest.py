"""
Test configuration for simplify tests
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from options import Options


@pytest.fixture
def options():
  """Default options: lenient keyword, 32-bit integers, overflow is an error"""
  return Options()


@pytest.fixture
def write_input(tmp_path):
  """Write lines to a temporary input file and return its path"""
  def write(*lines):
    path = tmp_path / "input.txt"
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path
  return write
