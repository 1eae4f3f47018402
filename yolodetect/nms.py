"""Greedy non-maximum suppression over integer boxes."""

from __future__ import annotations


def iou(a, b):
    """Intersection over union of two boxes with left, top, width and height."""
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    right = min(a.left + a.width, b.left + b.width)
    bottom = min(a.top + a.height, b.top + b.height)
    inter = max(0, right - left) * max(0, bottom - top)
    union = a.width * a.height + b.width * b.height - inter
    if union <= 0:
        return 0.0
    return inter / union


def nms_boxes(boxes, scores, score_threshold, nms_threshold):
    """Indices of the boxes kept, highest score first.

    Boxes scoring at or below ``score_threshold`` are dropped; a box is
    suppressed when it overlaps an already kept box by more than
    ``nms_threshold``.
    """
    if len(boxes) != len(scores):
        raise ValueError("boxes and scores must have the same length")
    candidates = [i for i, score in enumerate(scores) if score > score_threshold]
    candidates.sort(key=lambda i: scores[i], reverse=True)

    kept = []
    for idx in candidates:
        if all(iou(boxes[idx], boxes[k]) <= nms_threshold for k in kept):
            kept.append(idx)
    return kept