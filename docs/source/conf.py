"""Sphinx documentation configuration for after."""

from __future__ import annotations

import os
import sys
from pathlib import Path

# -- Project information -----------------------------------------------------

project = "after"
copyright = "2026, after contributors"
author = "after contributors"

# -- General configuration ---------------------------------------------------

# Make package importable for autodoc (src layout)
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

# Honor SOURCE_DATE_EPOCH when set (reproducible builds)
if os.environ.get("SOURCE_DATE_EPOCH"):
    today_fmt = "%Y-%m-%d"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
