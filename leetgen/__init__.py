"""leetgen — per-language code scaffolds for coding-challenge problems."""

__version__ = "0.1.0"
