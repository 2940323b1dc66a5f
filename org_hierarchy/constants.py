"""
Organizational Hierarchy: Diagnostic Thresholds (Default Values)

Used by diagnostics.py to flag unusual shapes. They never block a move.
"""

# --- Span of control ---
# Direct reports above this count produce a warning.
WIDE_SPAN_THRESHOLD: int = 8

# --- Depth ---
# Levels below the root above this count produce a warning.
DEEP_HIERARCHY_THRESHOLD: int = 6
