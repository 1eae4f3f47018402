"""Decoding of raw YOLO network outputs into pixel-space detections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

INPUT_SIZE = 640
TRANSPOSED_SCORE_THRESHOLD = 0.25
STANDARD_CONFIDENCE_THRESHOLD = 0.3

_TRANSPOSED_ROWS = 84
_COORDINATES = 4
_STANDARD_CLASS_START = 5
_STANDARD_CLASS_END = 85


class UnsupportedOutputFormat(ValueError):
    """Raised when a network output has a layout that no decoder understands."""


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle in integer pixel coordinates."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Detection:
    """A detected object: where it is, what it is and how sure the model is."""

    box: Box
    class_id: int
    confidence: float


def clamp_box(left, top, width, height, image_width, image_height):
    """Fit a box into the image; return None when nothing of it is left."""
    left = max(0, min(left, image_width - 1))
    top = max(0, min(top, image_height - 1))
    width = min(width, image_width - left)
    height = min(height, image_height - top)
    if width > 0 and height > 0:
        return Box(left, top, width, height)
    return None


def _best_scores(scores: np.ndarray, axis: int) -> tuple[np.ndarray, np.ndarray]:
    """Highest positive score and its index along an axis; (0, 0) where none is positive."""
    if scores.shape[axis] == 0:
        length = scores.shape[1 - axis]
        return np.zeros(length, dtype=np.float32), np.zeros(length, dtype=np.int64)
    raw = scores.max(axis=axis)
    positive = raw > 0
    best = np.where(positive, raw, np.float32(0)).astype(np.float32)
    ids = np.where(positive, scores.argmax(axis=axis), 0)
    return best, ids


def _first_batch(output) -> np.ndarray:
    data = np.asarray(output, dtype=np.float32)
    if data.ndim == 3:
        data = data[0]
    return data


def decode_transposed(output, image_width, image_height,
                      score_threshold=TRANSPOSED_SCORE_THRESHOLD):
    """Decode a [1, 4 + classes, candidates] output with centre boxes in input pixels."""
    data = _first_batch(output)
    if data.ndim != 2 or data.shape[0] <= _COORDINATES:
        raise UnsupportedOutputFormat(f"unexpected transposed output shape {data.shape}")
    scale_x = image_width / float(INPUT_SIZE)
    scale_y = image_height / float(INPUT_SIZE)
    best, class_ids = _best_scores(data[_COORDINATES:], axis=0)

    detections = []
    for i in np.flatnonzero(best > score_threshold):
        x, y, w, h = (float(v) for v in data[:_COORDINATES, i])
        box = clamp_box(
            int((x - w / 2) * scale_x),
            int((y - h / 2) * scale_y),
            int(w * scale_x),
            int(h * scale_y),
            image_width,
            image_height,
        )
        if box is not None:
            detections.append(Detection(box, int(class_ids[i]), float(best[i])))
    return detections


def decode_standard(output, image_width, image_height,
                    confidence_threshold=STANDARD_CONFIDENCE_THRESHOLD):
    """Decode a [1, candidates, 5 + classes] output with normalised centre boxes."""
    data = _first_batch(output)
    if data.ndim != 2 or data.shape[1] <= _COORDINATES:
        raise UnsupportedOutputFormat(f"unexpected standard output shape {data.shape}")
    class_scores = data[:, _STANDARD_CLASS_START:_STANDARD_CLASS_END]
    best, class_ids = _best_scores(class_scores, axis=1)
    confidences = data[:, _COORDINATES] * best

    detections = []
    for i in np.flatnonzero(confidences > confidence_threshold):
        cx, cy, w, h = (float(v) for v in data[i, :_COORDINATES])
        box = clamp_box(
            int((cx - w / 2) * image_width),
            int((cy - h / 2) * image_height),
            int(w * image_width),
            int(h * image_height),
            image_width,
            image_height,
        )
        if box is not None:
            detections.append(Detection(box, int(class_ids[i]), float(confidences[i])))
    return detections


def decode_outputs(outputs: Sequence, image_width, image_height):
    """Pick a decoder from the shape of the first output and run it."""
    if len(outputs) == 0:
        return []
    first = np.asarray(outputs[0])
    if first.ndim == 3 and first.shape[1] == _TRANSPOSED_ROWS:
        return decode_transposed(first, image_width, image_height)
    if first.ndim == 3 and first.shape[2] > _COORDINATES:
        return decode_standard(first, image_width, image_height)
    raise UnsupportedOutputFormat(f"unsupported model output shape {first.shape}")