import sys
from pathlib import Path

# Make the src layout importable when running tests from the repo root.
SRC_ROOT = Path(__file__).resolve().parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
