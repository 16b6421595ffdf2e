import sys
from pathlib import Path

# Make the src-layout package importable when running tests from a checkout
SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))
