"""tolist: a single-user task tracker with a console front end."""

__version__ = "0.1.0"
