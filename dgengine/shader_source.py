"""Shader source text per domain, with comments stripped."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .shader_utils import ShaderDomain


def remove_comments(text: str) -> str:
    """Strip ``//`` line comments (with their newline) and ``/* */`` block comments."""
    out: list[str] = []
    chars = iter(text)
    for c in chars:
        if c != "/":
            out.append(c)
            continue
        nxt = next(chars, None)
        if nxt is None:
            out.append("/")
            break
        if nxt == "/":
            for skipped in chars:
                if skipped == "\n":
                    break
        elif nxt == "*":
            for skipped in chars:
                # A closing '/' only counts directly after a '*' that starts a pair.
                if skipped == "*" and next(chars, None) == "/":
                    break
        else:
            out.append("/")
            out.append(nxt)
    return "".join(out)


@dataclass
class ShaderSourceElement:
    """The source text for one shader domain."""

    domain: ShaderDomain = ShaderDomain.VERTEX
    text: str = ""


class ShaderSource:
    """Holds one comment-free source text per shader domain."""

    def __init__(self, elements: Iterable[ShaderSourceElement] = ()) -> None:
        self._sources: dict[ShaderDomain, str] = {}
        self.load(elements)

    def load(self, elements: Iterable[ShaderSourceElement]) -> None:
        """Replace all sources with ``elements``; later entries win per domain."""
        self.clear()
        for element in elements:
            self._sources[ShaderDomain(element.domain)] = remove_comments(element.text)

    def get(self, domain: ShaderDomain) -> str:
        return self._sources[ShaderDomain(domain)]

    def clear(self) -> None:
        self._sources = {domain: "" for domain in ShaderDomain}