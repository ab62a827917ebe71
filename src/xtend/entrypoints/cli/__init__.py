"""The ``xtend`` command-line interface."""
