"""Entrypoints for xtend.

Expose the helper library to the outside world. Currently this is the
``xtend`` command-line interface, which parses inputs, calls the helpers and
presents the results.
"""
