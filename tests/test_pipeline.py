import numpy as np
import pytest
from PIL import Image

from yolodetect.decode import Box, UnsupportedOutputFormat
from yolodetect.pipeline import Detector, blob_from_image
from yolodetect.render import BOX_COLOR


class FakeNet:
    def __init__(self, outputs):
        self.outputs = outputs
        self.blobs = []

    def __call__(self, blob):
        self.blobs.append(blob)
        return self.outputs


def make_transposed(candidates):
    out = np.zeros((1, 84, len(candidates)), dtype=np.float32)
    for i, (cx, cy, w, h, class_id, score) in enumerate(candidates):
        out[0, :4, i] = (cx, cy, w, h)
        out[0, 4 + class_id, i] = score
    return out


def black(size=640):
    return Image.new("RGB", (size, size), (0, 0, 0))


def test_blob_shape_and_range():
    blob = blob_from_image(Image.new("RGB", (100, 50), (255, 255, 255)))
    assert blob.shape == (1, 3, 640, 640)
    assert blob.dtype == np.float32
    assert np.all(blob == 1.0)


def test_blob_channel_order_is_rgb():
    blob = blob_from_image(Image.new("RGB", (32, 32), (255, 0, 0)), 16)
    assert blob.shape == (1, 3, 16, 16)
    assert np.all(blob[0, 0] == 1.0)
    assert np.all(blob[0, 1:] == 0.0)


def test_detect_returns_decoded_box():
    net = FakeNet([make_transposed([(25, 20, 50, 40, 7, 0.9)])])
    dets = Detector(net).detect(black())
    assert len(dets) == 1
    assert dets[0].box == Box(0, 0, 50, 40)
    assert dets[0].class_id == 7
    assert net.blobs[0].shape == (1, 3, 640, 640)


def test_detect_suppresses_duplicates():
    net = FakeNet([make_transposed([
        (100, 100, 80, 80, 0, 0.6),
        (102, 102, 80, 80, 0, 0.9),
    ])])
    dets = Detector(net).detect(black())
    assert len(dets) == 1
    assert dets[0].confidence == pytest.approx(0.9, rel=1e-6)


def test_detect_accepts_single_array():
    net = FakeNet(make_transposed([(25, 20, 50, 40, 3, 0.9)]))
    dets = Detector(net).detect(black())
    assert [d.class_id for d in dets] == [3]


def test_detect_unsupported_format_raises():
    net = FakeNet([np.zeros((5, 5), dtype=np.float32)])
    with pytest.raises(UnsupportedOutputFormat):
        Detector(net).detect(black())


def test_detect_empty_outputs():
    assert Detector(FakeNet([])).detect(black()) == []


def test_detect_from_path(tmp_path):
    path = tmp_path / "frame.png"
    black().save(path)
    net = FakeNet([make_transposed([(25, 20, 50, 40, 7, 0.9)])])
    assert Detector(net).detect(path) == Detector(net).detect(black())


def test_process_image_empty_outputs_returns_copy():
    image = black(100)
    result = Detector(FakeNet([])).process_image(image)
    assert result.tobytes() == image.tobytes()


def test_process_image_without_detections_draws_message():
    image = black(200)
    result = Detector(FakeNet([make_transposed([])])).process_image(image)
    assert result.size == image.size
    assert result.tobytes() != image.tobytes()
    assert result.getextrema()[1] == (0, 0)


def test_process_image_unsupported_draws_message():
    image = black(200)
    result = Detector(FakeNet([np.zeros((5, 5), dtype=np.float32)])).process_image(image)
    assert result.getextrema()[0][1] > 0


def test_process_image_draws_detection():
    net = FakeNet([make_transposed([(200, 200, 100, 100, 0, 0.9)])])
    result = Detector(net, ["thing"]).process_image(black())
    dets = Detector(net, ["thing"]).detect(black())
    box = dets[0].box
    assert result.getpixel((box.left, box.top + box.height // 2)) == BOX_COLOR