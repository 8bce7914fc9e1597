"""Architecture linting core: spec models, import globs, source references and report operations."""

__version__ = "0.1.0"