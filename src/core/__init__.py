"""
Core domain models, numerical primitives, and payload contracts.

This package contains the computation layer of the toolbox, independent of
the UI shell (routing, theming, clipboard, browser APIs).
"""
