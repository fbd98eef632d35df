from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

_ORDERED_MARKER = re.compile(r"^\d+\.\s")
_BOLD = re.compile(r"\*\*(.*?)\*\*")


# ----------------------------
# Display nodes
# ----------------------------
@dataclass(frozen=True)
class Span:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class Heading:
    level: int
    spans: Tuple[Span, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ListItem:
    ordered: bool
    spans: Tuple[Span, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Paragraph:
    spans: Tuple[Span, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Spacer:
    pass


Block = Union[Heading, ListItem, Paragraph, Spacer]


def format_inline(text: str) -> Tuple[Span, ...]:
    """
    Split text on **bold** pairs. Odd split positions are the captured
    bold runs; unpaired asterisks never match and stay literal.
    """
    parts = _BOLD.split(text)
    spans = []
    for i, part in enumerate(parts):
        if not part:
            continue
        spans.append(Span(part, bold=(i % 2 == 1)))
    return tuple(spans)


def parse_line(line: str) -> Block:
    if line.startswith("### "):
        return Heading(3, format_inline(line[4:]))
    if line.startswith("## "):
        return Heading(2, format_inline(line[3:]))
    if line.startswith("# "):
        return Heading(1, format_inline(line[2:]))
    if line.startswith("- ") or line.startswith("* "):
        return ListItem(False, format_inline(line[2:]))
    if _ORDERED_MARKER.match(line):
        return ListItem(True, format_inline(_ORDERED_MARKER.sub("", line, count=1)))
    if not line.strip():
        return Spacer()
    return Paragraph(format_inline(line))


class MarkdownDocument:
    """
    Lazy view over a block of agent text. Lines are parsed on iteration,
    so the same document can be walked any number of times.
    """

    def __init__(self, text: Optional[str]):
        self.text = text or ""

    def __iter__(self) -> Iterator[Block]:
        if not self.text:
            return
        for line in self.text.split("\n"):
            yield parse_line(line.rstrip("\r"))

    def __bool__(self) -> bool:
        return bool(self.text)

    def blocks(self) -> List[Block]:
        return list(self)


def render_markdown(text: Optional[str]) -> MarkdownDocument:
    return MarkdownDocument(text if isinstance(text, str) else None)


# ----------------------------
# HTML output (Streamlit shell)
# ----------------------------
def _spans_html(spans: Tuple[Span, ...]) -> str:
    out = []
    for span in spans:
        escaped = html.escape(span.text)
        out.append(f"<strong>{escaped}</strong>" if span.bold else escaped)
    return "".join(out)


def to_html(document: MarkdownDocument) -> str:
    chunks: List[str] = []
    open_list: Optional[str] = None

    for block in document:
        if isinstance(block, ListItem):
            tag = "ol" if block.ordered else "ul"
            if open_list != tag:
                if open_list:
                    chunks.append(f"</{open_list}>")
                chunks.append(f"<{tag}>")
                open_list = tag
            chunks.append(f"<li>{_spans_html(block.spans)}</li>")
            continue

        if open_list:
            chunks.append(f"</{open_list}>")
            open_list = None

        if isinstance(block, Heading):
            # h1 is reserved for the page title
            tag = f"h{block.level + 1}"
            chunks.append(f"<{tag}>{_spans_html(block.spans)}</{tag}>")
        elif isinstance(block, Spacer):
            chunks.append('<div style="height:0.25rem"></div>')
        else:
            chunks.append(f"<p>{_spans_html(block.spans)}</p>")

    if open_list:
        chunks.append(f"</{open_list}>")

    return "".join(chunks)
