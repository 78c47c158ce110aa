"""Comparison sheet: renderings side by side, each captioned."""

from dataclasses import dataclass
from PIL import Image, ImageDraw, ImageFont


@dataclass
class LabeledImage:
    """Image with a caption."""
    image: Image.Image
    label: str


@dataclass
class SheetLayout:
    """Sheet layout configuration."""
    cols: int
    cell_size: int = 384
    padding: int = 16
    caption_height: int = 40
    background_color: tuple[int, int, int] = (24, 24, 24)
    caption_color: tuple[int, int, int] = (230, 230, 230)

    @classmethod
    def for_count(cls, n: int, **kwargs) -> 'SheetLayout':
        """Layout with up to 3 columns, wrapping onto further rows."""
        return cls(cols=max(1, min(n, 3)), **kwargs)


def thumbnail(image: Image.Image, cell_size: int) -> Image.Image:
    """
    Scale image to fit a square cell, never upscaling.
    Nearest-neighbour keeps hard color edges intact.
    """
    thumb = image.convert("RGB")
    thumb.thumbnail((cell_size, cell_size), Image.Resampling.NEAREST)
    return thumb


def create_grid(
    images: list[LabeledImage],
    layout: SheetLayout
) -> Image.Image:
    """
    Lay captioned images out on a sheet.

    Args:
        images: List of LabeledImage objects
        layout: SheetLayout configuration

    Returns:
        RGB PIL Image containing the sheet
    """
    if not images:
        raise ValueError("Must provide at least one image")

    cols = layout.cols
    rows = (len(images) + cols - 1) // cols
    cell_w = layout.cell_size
    cell_h = layout.cell_size + layout.caption_height

    sheet = Image.new(
        'RGB',
        (cols * cell_w + (cols + 1) * layout.padding, rows * cell_h + (rows + 1) * layout.padding),
        layout.background_color,
    )
    draw = ImageDraw.Draw(sheet)
    font = ImageFont.load_default(size=20)

    for idx, item in enumerate(images):
        row, col = divmod(idx, cols)
        left = layout.padding + col * (cell_w + layout.padding)
        top = layout.padding + row * (cell_h + layout.padding)

        thumb = thumbnail(item.image, layout.cell_size)
        # Centre in the square part of the cell
        sheet.paste(thumb, (left + (cell_w - thumb.width) // 2, top + (layout.cell_size - thumb.height) // 2))

        text_w = draw.textlength(item.label, font=font)
        draw.text(
            (left + (cell_w - text_w) / 2, top + layout.cell_size + 8),
            item.label,
            fill=layout.caption_color,
            font=font,
        )

    return sheet
