"""
Top‑level package for the QuickKart store layout API.

This file makes ``quickkart_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``quickkart_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
