"""Parsing of builtin documentation and registration arguments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DocMarkdown:
    """Structured sections of a markdown doc comment."""

    summary: str = ""
    examples: list[str] = field(default_factory=list)
    see_also: list[str] = field(default_factory=list)
    full_markdown: str = ""


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [line[:-1] if line.endswith("\r") else line for line in parts]


def _code_examples(content: str) -> list[str]:
    examples = []
    for block in content.split("```"):
        block = block.strip()
        if block.startswith("lisp"):
            code = block[len("lisp"):].strip()
            if code:
                examples.append(code)
    return examples


def _comma_list(text: str) -> list[str]:
    return [part.strip() for part in text.strip().split(",") if part.strip()]


def parse_doc_markdown(raw_doc: str) -> DocMarkdown:
    """Split a doc comment into summary, lisp examples and see-also names."""
    doc = DocMarkdown(full_markdown=raw_doc)
    section = "summary"
    content: list[str] = []

    def flush() -> None:
        text = "".join(content)
        if section == "summary":
            doc.summary = text.strip()
        elif section == "examples":
            doc.examples.extend(_code_examples(text))
        elif section == "see also":
            doc.see_also = _comma_list(text)

    for line in _lines(raw_doc):
        trimmed = line.strip()
        if trimmed.startswith("# "):
            flush()
            header = trimmed[2:].strip().lower()
            if "example" in header:
                section = "examples"
            elif "see" in header or "related" in header:
                section = "see also"
            else:
                section = "other"
            content = []
        else:
            content.append(line + "\n")
    flush()
    return doc


def _quoted_after(text: str, marker: str) -> str:
    start = text.find(marker)
    if start < 0:
        return ""
    rest = text[start + len(marker):]
    end = rest.find('"')
    return rest[:end] if end >= 0 else ""


def parse_builtin_args(attr: str) -> tuple[str, str, list[str]]:
    """Extract ``(name, category, related)`` from ``name = "..", category = "..", related(..)``."""
    name = _quoted_after(attr, 'name = "')
    category = _quoted_after(attr, 'category = "')
    related: list[str] = []
    start = attr.find("related")
    if start >= 0:
        rest = attr[start:]
        open_at = rest.find("(")
        close_at = rest.find(")")
        if 0 <= open_at < close_at:
            related = _comma_list(rest[open_at + 1:close_at])
    return name, category, related