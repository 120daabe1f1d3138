"""Interpreter constants and I/O sandbox configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

VERSION = "1.0.0"
WELCOME_MESSAGE = "Lisp Interpreter v1.0"
WELCOME_SUBTITLE = "A Scheme-flavored Lisp interpreter"

WELCOME_FOOTER = """
Quick Start Examples:
  (+ 1 2 3)                              => 6
  (map (lambda (x) (* x 2)) '(1 2 3))    => (2 4 6)
  (define (fib n) ...)                   => define a recursive function
  (http-request "https://api.example.com" {:method "GET"})

Features:
  * Maps with keywords: {:name "Alice" :age 30}
  * Structured I/O returning maps with metadata
  * Macros and tail-call optimisation

Commands:
  (help)                    - list all functions by category
  (help 'function-name)     - detailed help for one function
  (quit) or (exit)          - leave the REPL
"""

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


def _default_allowed_paths() -> list[Path]:
    return [Path("./data"), Path("./examples"), Path("./scripts")]


@dataclass
class FsConfig:
    """Filesystem sandbox configuration."""

    allowed_paths: list[Path] = field(default_factory=_default_allowed_paths)
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


@dataclass
class NetConfig:
    """Network sandbox configuration.

    An empty ``allowed_addresses`` list means no restriction when enabled.
    """

    enabled: bool = False
    allowed_addresses: list[str] = field(default_factory=list)


@dataclass
class IoConfig:
    """Combined filesystem and network sandbox configuration."""

    filesystem: FsConfig = field(default_factory=FsConfig)
    network: NetConfig = field(default_factory=NetConfig)