"""Run a fixed catalog of MongoDB queries against the bookstore collection."""

__version__ = "1.0.0"
