"""Core package: page retrieval, errors and selection-limit handling.

Submodules are imported directly (artgrid.core.page_cache, artgrid.core.errors,
artgrid.core.selection_limit); models depends on errors, so nothing is
re-exported here.
"""
