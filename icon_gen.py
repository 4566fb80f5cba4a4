"""Generate the window/tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

_FONTS = ("segoeuib.ttf", "DejaVuSans-Bold.ttf")


def _load_font(size: int) -> ImageFont.ImageFont | None:
    for name in _FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return None


def create_icon_image(day: int, accent: str = "#0078D4") -> Image.Image:
    """Return a 64×64 RGBA calendar-sheet image with ``day`` in the middle."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    band = 14
    draw.rectangle((0, 0, size - 1, band), fill=accent)
    draw.rectangle((0, 0, size - 1, size - 1), outline=accent, width=2)

    text = str(day)
    area = size - band - 4

    # Find the largest font size that fits below the band
    font = None
    font_size = 60
    while font_size > 10:
        font = _load_font(font_size)
        if font is None:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 8 and bbox[3] - bbox[1] <= area:
            break
        font_size -= 1

    # Centre the visible pixels in the area below the band
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + 2 + (area - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
