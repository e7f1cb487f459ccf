"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

_HEADER = "#5C8AFF"


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: a tear-off calendar page with today's day."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    text = str((today or date.today()).day)
    header_h = 14
    draw.rectangle((0, 0, size - 1, header_h), fill=_HEADER)
    draw.rectangle((0, 0, size - 1, size - 1), outline="#888888")

    # Largest font that fits below the header strip
    avail_h = size - header_h - 4
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 6 and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header_h + (size - header_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
