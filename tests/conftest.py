"""Pytest configuration for utilkit tests.

This file is automatically loaded by pytest before running tests.
It configures the Python path so that the utilkit package can be imported
from a source checkout without installing it.
"""

import sys
from pathlib import Path

# Add the repository root to Python path
# This allows `from utilkit.utils import ...` to work
repository_root = Path(__file__).parent.parent
sys.path.insert(0, str(repository_root))
