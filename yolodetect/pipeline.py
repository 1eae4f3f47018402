"""Running a YOLO network on an image and drawing what it finds."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image

from .decode import INPUT_SIZE, UnsupportedOutputFormat, decode_outputs
from .nms import nms_boxes
from .render import annotate, draw_message

NMS_SCORE_THRESHOLD = 0.25
NMS_IOU_THRESHOLD = 0.45

COCO_CLASSES = (
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck", "boat",
    "traffic light", "fire hydrant", "stop sign", "parking meter", "bench", "bird", "cat",
    "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra", "giraffe", "backpack",
    "umbrella", "handbag", "tie", "suitcase", "frisbee", "skis", "snowboard", "sports ball",
    "kite", "baseball bat", "baseball glove", "skateboard", "surfboard", "tennis racket",
    "bottle", "wine glass", "cup", "fork", "knife", "spoon", "bowl", "banana", "apple",
    "sandwich", "orange", "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair",
    "couch", "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse",
    "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "book", "clock", "vase", "scissors", "teddy bear", "hair drier",
    "toothbrush",
)


def blob_from_image(image, size=INPUT_SIZE):
    """Resize to a square, scale to [0, 1] and lay out as a 1x3xHxW RGB float32 array."""
    rgb = image.convert("RGB").resize((size, size), Image.BILINEAR)
    pixels = np.asarray(rgb, dtype=np.float32) / np.float32(255.0)
    return np.ascontiguousarray(pixels.transpose(2, 0, 1)[np.newaxis])


def _load(image):
    if isinstance(image, (str, os.PathLike)):
        with Image.open(image) as opened:
            return opened.convert("RGB")
    return image.convert("RGB")


class Detector:
    """Runs a network on images and turns its outputs into detections.

    ``net`` is any callable that takes the input blob and returns the
    network's outputs: one array or a sequence of arrays.
    """

    def __init__(self, net, classes=None):
        self.net = net
        self.classes = tuple(classes) if classes is not None else COCO_CLASSES

    def _forward(self, image):
        outputs = self.net(blob_from_image(image))
        if isinstance(outputs, np.ndarray):
            return [outputs]
        return list(outputs)

    @staticmethod
    def _suppress(candidates):
        kept = nms_boxes(
            [d.box for d in candidates],
            [d.confidence for d in candidates],
            NMS_SCORE_THRESHOLD,
            NMS_IOU_THRESHOLD,
        )
        return [candidates[i] for i in kept]

    def detect(self, image):
        """Detections left after non-maximum suppression, best first."""
        image = _load(image)
        outputs = self._forward(image)
        return self._suppress(decode_outputs(outputs, *image.size))

    def process_image(self, image):
        """A copy of the image annotated with detections or a status message."""
        image = _load(image)
        outputs = self._forward(image)
        result = image.copy()
        if not outputs:
            return result
        try:
            candidates = decode_outputs(outputs, *image.size)
        except UnsupportedOutputFormat:
            result = draw_message(result, "Unsupported model output format")
            candidates = []
        if not candidates:
            return draw_message(result, "No objects detected")
        return annotate(result, self._suppress(candidates), self.classes)