"""Drawing of detections and status messages onto images."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

BOX_COLOR = (0, 255, 0)
TEXT_COLOR = (0, 0, 0)
MESSAGE_COLOR = (255, 0, 0)
MESSAGE_ORIGIN = (50, 50)

_BASE_FONT_PIXELS = 22
_MESSAGE_STYLE_SCALE = 1.0
_MESSAGE_THICKNESS = 2


@dataclass(frozen=True)
class DrawStyle:
    """Line thickness and font scale used to annotate one image."""

    thickness: int
    font_scale: float

    @property
    def font_size(self) -> int:
        return max(8, round(_BASE_FONT_PIXELS * self.font_scale))


def style_for(image_width, image_height):
    """Thickness and font scale that grow with the image's shorter side."""
    scale_factor = min(image_width, image_height) / 500.0
    return DrawStyle(
        thickness=max(1, int(scale_factor * 2)),
        font_scale=max(0.5, scale_factor * 0.6),
    )


def label_text(class_name, confidence):
    """Label such as 'person: 87%' with the percentage truncated."""
    return f"{class_name}: {int(confidence * 100)}%"


def _font(size: int):
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def annotate(image, detections, classes):
    """Return a copy of the image with boxes and labels drawn for the detections.

    Detections whose class id is not an index into ``classes`` are skipped.
    """
    result = image.convert("RGB")
    draw = ImageDraw.Draw(result)
    style = style_for(*result.size)
    font = _font(style.font_size)

    for detection in detections:
        if not 0 <= detection.class_id < len(classes):
            continue
        box = detection.box
        draw.rectangle(
            [box.left, box.top, box.left + box.width - 1, box.top + box.height - 1],
            outline=BOX_COLOR,
            width=style.thickness,
        )
        label = label_text(classes[detection.class_id], detection.confidence)
        _, _, text_width, text_height = draw.textbbox((0, 0), label, font=font)
        baseline_y = max(box.top, text_height)
        draw.rectangle(
            [box.left, baseline_y - text_height,
             box.left + text_width, baseline_y + style.thickness],
            fill=BOX_COLOR,
        )
        draw.text((box.left, baseline_y - text_height), label, fill=TEXT_COLOR, font=font)
    return result


def draw_message(image, message):
    """Return a copy of the image with a red message near its top-left corner."""
    result = image.convert("RGB")
    draw = ImageDraw.Draw(result)
    font = _font(DrawStyle(_MESSAGE_THICKNESS, _MESSAGE_STYLE_SCALE).font_size)
    _, _, _, text_height = draw.textbbox((0, 0), message, font=font)
    x, y = MESSAGE_ORIGIN
    draw.text((x, y - text_height), message, fill=MESSAGE_COLOR, font=font)
    return result