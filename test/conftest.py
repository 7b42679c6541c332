"""
Test configuration for letprint tests
"""

import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from parsing import create_parser
from interpreter import create_interpreter


SAMPLE_PROGRAM = """
  let x = 69;
  let y = 420;
  print(x);
  print(1337);
  print(y);
"""


@pytest.fixture
def parser():
  """Provide a fresh parser for each test"""
  return create_parser()


@pytest.fixture
def interpreter():
  """Provide a fresh interpreter for each test"""
  return create_interpreter()


@pytest.fixture
def examples_dir():
  return project_root / "examples"


@pytest.fixture
def sample_program():
  return SAMPLE_PROGRAM
