# scripts/__init__.py

"""Operational command-line scripts."""
