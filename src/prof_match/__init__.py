"""Prof Match - student-to-professor advising matcher."""

__version__ = "0.1.0"
