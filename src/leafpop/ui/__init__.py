"""
Notebook display helpers - requires marimo (install the "marimo" extra).

Import from leafpop.ui.marimo directly; nothing is re-exported so that the
core package works without marimo installed.
"""
