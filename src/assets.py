import os
from typing import Dict, Tuple
from colour import Color
from PIL import Image, ImageDraw
from domain.models import KEYTAG_COLORS, Keytag, keytag_code
from libuniversal import Paths, TagLayout, resource_path

KEYTAG_SIZE = (64, 150)
RING_HEIGHT = 22

_pil_cache: Dict[Tuple[str, bool], Image.Image] = {}

def images_root(dir_root: str) -> str:
    """
    Folder that holds images/<lang>/.
    A relative dir_root is anchored to the bundle/app folder (not cwd).
    """
    root = dir_root or ""
    if os.path.isabs(root):
        return os.path.join(root, Paths.IMAGES_FOLDER.value)
    return os.path.abspath(resource_path(os.path.join(root, Paths.IMAGES_FOLDER.value)))

def keytag_image_name(token: str, face: bool) -> str:
    code = keytag_code(token)
    return code + ("_Front" if face else "")

def keytag_image_path(dir_root: str, lang: str, token: str, face: bool) -> str:
    return os.path.join(images_root(dir_root), lang, keytag_image_name(token, face) + ".png")

def keytag_is_closed(token: str, layout: TagLayout) -> bool:
    # white tags always hang from a closed ring
    return token == Keytag.WHITE.value or layout != TagLayout.LINEAR

def keytag_rgba(code: str) -> tuple:
    c = Color(KEYTAG_COLORS.get(code, "gray"))
    return tuple(round(v * 255) for v in c.rgb) + (255,)

def _draw_placeholder(code: str) -> Image.Image:
    w, h = KEYTAG_SIZE
    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)
    fill = keytag_rgba(code)
    d.rounded_rectangle((0, 0, w - 1, h - 1), radius=w // 3, fill=fill, outline=(40, 40, 40, 255), width=2)

    # punch the ring hole
    hole = w // 5
    cx = w // 2
    d.ellipse((cx - hole, 6, cx + hole, 6 + hole * 2), fill=(0, 0, 0, 0), outline=(40, 40, 40, 255), width=2)

    text_fill = (0, 0, 0, 255) if sum(fill[:3]) > 382 else (255, 255, 255, 255)
    left, top, right, bottom = d.textbbox((0, 0), code)
    d.text((cx - (right - left) // 2, h // 2 - (bottom - top) // 2), code, fill=text_fill)
    return img

def _with_ring(tag: Image.Image) -> Image.Image:
    w, h = tag.size
    img = Image.new("RGBA", (w, h + RING_HEIGHT), (0, 0, 0, 0))
    img.paste(tag, (0, RING_HEIGHT), tag)
    d = ImageDraw.Draw(img)
    r = RING_HEIGHT
    cx = w // 2
    d.ellipse((cx - r // 2, 1, cx + r // 2, r * 2 - 2), outline=(160, 160, 160, 255), width=3)
    return img

def load_keytag_image(path: str, token: str, closed: bool) -> Image.Image:
    """
    Loads a keytag image from disk, falling back to a drawn placeholder
    in the tag's colour when the file can't be read.
    """
    key = (path, closed)
    img = _pil_cache.get(key)
    if img is not None:
        return img

    try:
        base = Image.open(path).convert("RGBA")
    except (OSError, ValueError) as e:
        print(f"Using placeholder for keytag '{token}': {e}")
        base = _draw_placeholder(keytag_code(token))

    img = _with_ring(base) if closed else base
    _pil_cache[key] = img
    return img

