"""Documento HTML respaldado por BeautifulSoup.

Implementa `core.interfaces.document.Document` para que el actualizador de
encabezado trabaje sobre ficheros HTML reales.
"""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from core.interfaces.document import Document, TextElement


class SoupElement(TextElement):
    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def set_text(self, text: str) -> None:
        # `.string = ...` reemplaza todos los hijos por un único nodo de texto.
        self._tag.string = text


class SoupDocument(Document):
    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_html(cls, html: str) -> "SoupDocument":
        return cls(BeautifulSoup(html, "html.parser"))

    @classmethod
    def from_path(cls, path: Path) -> "SoupDocument":
        return cls.from_html(path.read_text(encoding="utf-8"))

    def query_selector(self, selector: str) -> SoupElement | None:
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        return SoupElement(tag)

    def to_html(self) -> str:
        return str(self._soup)

    def write(self, path: Path) -> Path:
        path.write_text(self.to_html(), encoding="utf-8")
        return path
