"""autolinkgen — native autolinking code generator."""

__version__ = "0.1.0"
