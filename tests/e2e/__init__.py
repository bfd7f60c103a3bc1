"""
Browser test package for the playground demo site.

This package contains Playwright-based scenarios and demonstrates:
- Page Object Model (POM) pattern
- Strict locators with explicit positions for duplicated widgets
- Per-test isolation of page and page objects
"""
