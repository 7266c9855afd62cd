# tests/utils/constants.py

from pathlib import Path


PROJ_ROOT = Path(__file__).resolve().parents[2]

# most verbose level, so failing tests show everything
DEFAULT_TEST_LOG_LEVEL = "trace"
