"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

from hijri_date import HijriDate


def create_icon_image(today: HijriDate | None = None,
                      color: str = "#059669") -> Image.Image:
    """Return a 64×64 RGBA image: today's Hijri day number on a coloured disc."""
    size = 64
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse((0, 0, size - 1, size - 1), fill=color)

    if today is None:
        today = HijriDate.today()
    text = str(today.date)

    # Find the largest font size that fits inside the disc
    inner = size - 12
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= inner and th <= inner:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="white", font=font)

    return img
