"""Decoding, non-maximum suppression and drawing of YOLO-style object detections."""

__version__ = "0.1.0"