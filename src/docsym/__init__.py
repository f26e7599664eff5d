"""docsym: document symbol outlines for Ruby and Rails."""

__version__ = "0.1.0"
