"""Tests for xtend.

``unit/`` holds fast, isolated tests of the library modules and CLI helpers;
``e2e/`` drives the ``xtend`` command through Click's CliRunner. The root
conftest marks each test by folder, and hypothesis-based files add the
``property`` marker themselves.
"""
