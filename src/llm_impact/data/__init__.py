"""Packaged reference datasets for :mod:`llm_impact`."""
