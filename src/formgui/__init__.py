"""
PySide6 input surface for the textform validation engine.
"""
