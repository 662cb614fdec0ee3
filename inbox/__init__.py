"""Notification inbox package.

Renders a per-user notification inbox grouped by repository and handles the
mark-read / mark-all-read transitions against a pluggable notification store.
"""
