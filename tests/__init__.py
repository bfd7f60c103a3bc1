"""
Test suite for the playground page objects.

This package contains:
- unit/: Offline tests of locators, page objects, the fixture registry,
  configuration, and the command line, driven by a mocked page
- e2e/: Playwright browser scenarios against the live demo site
- smoke/: Fast HTTP-level checks that the demo site is up
"""
