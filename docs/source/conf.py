# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
import sphinx_rtd_dark_mode

# Project root holds the flat ``sim`` / ``ui`` packages
sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------

project = 'Road Sim'
copyright = '2026, Road Sim contributors'
author = 'Road Sim contributors'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",    # docstrings → API pages
    "sphinx.ext.napoleon",   # NumPy-style Parameters / Returns sections
    "sphinx.ext.viewcode",
    "sphinx_rtd_dark_mode"
]

napoleon_numpy_docstring = True
napoleon_google_docstring = False
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
}

templates_path = ['_templates']
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_static_path = []

# The window layer is not needed to document the API
autodoc_mock_imports = ["pygame"]
