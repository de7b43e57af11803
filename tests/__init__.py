"""Test suite for capcolor.

Test Structure:
- unit/: Unit tests per core package (palette, models, profiling, matching,
  corpus, caching, config, utils), the generator facade and the CLI
- fixtures/: Sample reference corpus
- conftest.py: Shared fixtures (keycap builders, color table)
"""
