import importlib
import re
from pathlib import Path

DOCS = Path(__file__).resolve().parents[1] / "docs"


def test_docs_index_lists_importable_modules():
    index = (DOCS / "index.rst").read_text()
    modules = re.findall(r"^\s+(grid_navigation\.\w+)$", index, flags=re.MULTILINE)
    assert "grid_navigation.PathFinder" in modules
    for name in modules:
        importlib.import_module(name)
