"""Actualización del encabezado principal de la página."""

from __future__ import annotations

import logging

from core.interfaces.document import Document

logger = logging.getLogger(__name__)

MAIN_HEADING_SELECTOR = "h1"


def update_main_heading(
    new_heading: str,
    document: Document,
    *,
    selector: str = MAIN_HEADING_SELECTOR,
) -> bool:
    """Reemplaza el texto del primer elemento que casa con `selector`.

    Si no existe, no hace nada y devuelve `False`. El elemento se busca en
    cada llamada.
    """

    element = document.query_selector(selector)
    if element is None:
        logger.debug("No element matches %r; heading left untouched", selector)
        return False
    element.set_text(new_heading)
    return True
