"""Core of a small Scheme-flavoured Lisp: values, environments, errors, sandbox configuration and built-ins."""

__version__ = "1.0.0"