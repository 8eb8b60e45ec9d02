"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import src...' works, and
registers hypothesis profiles for the property tests.

Select a profile with HYPOTHESIS_PROFILE=ci (more examples) or
HYPOTHESIS_PROFILE=dev (fewer, for quick local runs). Default: "default".
"""
import os
import sys
from pathlib import Path

from hypothesis import settings

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

settings.register_profile("ci", max_examples=1000)
settings.register_profile("dev", max_examples=25)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
