"""Vector helpers and random rotations built on numpy."""
