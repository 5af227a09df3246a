"""Small utilities: line run counting, TSV dumping, TCP echo tools, concurrency helpers and a user API."""

__version__ = "0.1.0"