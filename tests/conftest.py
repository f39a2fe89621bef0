import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `grid_navigation` and `main` import.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Figures are only ever written to files during tests.
os.environ.setdefault("MPLBACKEND", "Agg")
