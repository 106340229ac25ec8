# HTTP surface for the file explorer.
# Created: 2026-10-19
#
# Translates HTTP requests into core calls, serializes results to JSON and maps
# core error kinds to status codes. Mounted under a configurable prefix (/test by default).
