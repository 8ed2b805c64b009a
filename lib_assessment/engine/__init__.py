"""Assessment engine.

Sub-modules:
- accumulator – per-question answer storage
- scorer      – axis sums, normalization, classification, report
- session     – navigation / submit state machine
"""
