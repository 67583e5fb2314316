"""Contrato del documento HTML sobre el que actúa el actualizador de encabezado.

Por qué Protocol:
- Sustituye la referencia global a "el documento" por una capacidad inyectada.
- Solo expone lo necesario: buscar el primer elemento y reescribir su texto.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextElement(Protocol):
    """Elemento cuyo contenido de texto se puede leer y reemplazar."""

    @property
    def text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...


@runtime_checkable
class Document(Protocol):
    """Documento consultable por selector."""

    def query_selector(self, selector: str) -> TextElement | None:
        """Devuelve el primer elemento que casa con `selector` o `None`."""

        ...
