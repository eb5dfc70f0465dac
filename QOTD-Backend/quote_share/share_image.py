"""
Share-image rendering for quotes.

Draws the quote over a smart-matched background (or a blue gradient when
the background cannot be fetched or decoded) and returns PNG bytes.
"""
import io
import logging
import os
from typing import List, Optional, Tuple

import requests
from PIL import Image, ImageDraw, ImageFont, ImageOps

from quote_keywords import DEFAULT_CATEGORY

from .smart_match_client import SmartMatchClient

logger = logging.getLogger(__name__)

CANVAS_SIZE = (1200, 630)
MAX_TEXT_WIDTH = 1000
LINE_HEIGHT = 60
OVERLAY_ALPHA = 128  # 50% black
GRADIENT_START = (14, 165, 233)
GRADIENT_END = (2, 132, 199)
SHARE_WATERMARK = os.getenv('SHARE_WATERMARK', 'QuoteoftheDay.com')


def fetch_image_bytes(url: str, timeout: int = 10) -> Optional[bytes]:
    """Fetch raw image bytes over HTTP. Returns None on failure."""
    if not url:
        return None
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning(f"⚠️ Could not download background {url[:80]}: {e}")
        return None
    if resp.status_code != 200:
        logger.warning(f"⚠️ Background download returned {resp.status_code}")
        return None
    return resp.content


def load_font(size: int, bold: bool = True):
    name = 'DejaVuSans-Bold.ttf' if bold else 'DejaVuSans-Oblique.ttf'
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size)


def create_gradient_background(size: Tuple[int, int] = CANVAS_SIZE) -> Image.Image:
    """Top-to-bottom blend between the two brand blues."""
    w, h = size
    im = Image.new('RGB', size, color=GRADIENT_START)
    draw = ImageDraw.Draw(im)
    for y in range(h):
        t = y / max(1, h - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(GRADIENT_START, GRADIENT_END))
        draw.line([(0, y), (w, y)], fill=color)
    return im


def load_background(url: str, size: Tuple[int, int] = CANVAS_SIZE) -> Image.Image:
    """Background cropped to fill `size`; gradient when the image is unusable."""
    img_bytes = fetch_image_bytes(url)
    if img_bytes:
        try:
            with Image.open(io.BytesIO(img_bytes)) as im:
                return ImageOps.fit(im.convert('RGB'), size, Image.LANCZOS)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.warning(f"⚠️ Could not decode background image: {e}")
    return create_gradient_background(size)


def wrap_text(draw: ImageDraw.ImageDraw, text: str, font, max_width: int = MAX_TEXT_WIDTH) -> List[str]:
    """Greedy word wrap measured with the rendering font."""
    lines: List[str] = []
    current = ''
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if draw.textlength(candidate, font=font) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def render_quote_image(background: Image.Image, quote_text: str, quote_author: Optional[str] = None) -> bytes:
    """Overlay, quote lines, optional author and watermark; returns PNG bytes."""
    canvas = background.convert('RGBA')
    overlay = Image.new('RGBA', canvas.size, (0, 0, 0, OVERLAY_ALPHA))
    canvas = Image.alpha_composite(canvas, overlay)
    draw = ImageDraw.Draw(canvas)
    width, height = canvas.size

    quote_font = load_font(52)
    lines = wrap_text(draw, quote_text, quote_font)
    start_y = height / 2 - (len(lines) * LINE_HEIGHT) / 2
    for index, line in enumerate(lines):
        prefix = '"' if index == 0 else ''
        suffix = '"' if index == len(lines) - 1 else ''
        draw.text((width / 2, start_y + index * LINE_HEIGHT), prefix + line + suffix,
                  fill=(255, 255, 255), font=quote_font, anchor='mm')

    if quote_author:
        draw.text((width / 2, start_y + len(lines) * LINE_HEIGHT + 40), f"— {quote_author}",
                  fill=(240, 249, 255), font=load_font(32, bold=False), anchor='mm')

    if SHARE_WATERMARK:
        draw.text((width - 40, height - 40), SHARE_WATERMARK,
                  fill=(255, 255, 255), font=load_font(48), anchor='rs')

    out = io.BytesIO()
    canvas.convert('RGB').save(out, format='PNG')
    return out.getvalue()


def generate_quote_image(quote_text: str, quote_author: Optional[str] = None,
                         category: str = DEFAULT_CATEGORY,
                         client: Optional[SmartMatchClient] = None) -> Optional[bytes]:
    """Render a 1200x630 PNG share image for a quote.

    Returns None only when rendering itself fails.
    """
    client = client or SmartMatchClient()
    background_url = client.get_background_url(quote_text, category)
    background = load_background(background_url)
    try:
        return render_quote_image(background, quote_text, quote_author)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Failed to generate quote image: {e}")
        return None
