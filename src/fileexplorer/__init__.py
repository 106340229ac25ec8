# fileexplorer: path-safe HTTP file explorer rooted at a home directory.
# Created: 2026-10-19

__version__ = "0.1.0"
