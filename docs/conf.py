"""Sphinx configuration for filecharset documentation."""

import filecharset

project = "filecharset"
copyright = "2026, filecharset contributors"
author = "filecharset contributors"
release = filecharset.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
