# images.py
from __future__ import annotations
from typing import Dict, Tuple
from customtkinter import CTkImage
from assets import load_keytag_image
from domain.models import KeytagRender

# cache CTkImages by (path, closed, height) so re-calculating doesn't recreate them
_ctk_image_cache: Dict[Tuple[str, bool, int], CTkImage] = {}


def get_keytag_image(tag: KeytagRender, height: int = 0) -> CTkImage:
    """
    CTkImage is fine for CustomTkinter widgets; DO NOT use on tkinter.Canvas
    height=0 keeps the image's own size.
    """
    key = (tag.image_path, tag.closed, height)
    cached = _ctk_image_cache.get(key)
    if cached is not None:
        return cached

    pil = load_keytag_image(tag.image_path, tag.token, tag.closed)
    if height > 0 and pil.height != height:
        size = (max(1, round(pil.width * height / pil.height)), height)
    else:
        size = (pil.width, pil.height)

    img = CTkImage(pil, size=size)
    _ctk_image_cache[key] = img
    return img
