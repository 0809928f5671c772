"""
Shared utilities: logging/console setup and diagnostic rendering.
"""
