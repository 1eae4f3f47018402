# yolodetect

Post-processing for YOLO-family object detectors. It turns raw network
output arrays into pixel-space bounding boxes, filters them with
non-maximum suppression, and draws labelled results onto Pillow images.

## Output layouts

`yolodetect.decode.decode_outputs(outputs, image_width, image_height)` looks
at the shape of the first output array and picks a decoder:

- **Transposed**, shape `[1, 84, N]`, handled by `decode_transposed`. The
  first four rows are centre x, centre y, width and height in 640×640 input
  pixels. The remaining 80 rows are class scores. A candidate is kept when
  its best class score is above 0.25. Coordinates are scaled to the image.
- **Standard**, shape `[1, N, D]` with `D > 4`, handled by
  `decode_standard`. Each row holds a box normalised to the image, an
  objectness score, and class scores in columns 5 to 84. The confidence is
  objectness times the best class score and must be above 0.3.

Any other shape raises `UnsupportedOutputFormat`, which is a subclass of
`ValueError`. An empty list of outputs gives an empty list of detections.

Both decoders also take their threshold as an optional last argument.

Each result is a `Detection` with a `box`, a `class_id` and a `confidence`.
A `Box` has `left`, `top`, `width` and `height`, plus the properties
`right`, `bottom` and `area`. `clamp_box` fits every box inside the image.
Boxes that end up with no width or height are dropped.

```python
import numpy as np
from yolodetect.decode import decode_outputs

outputs = [np.zeros((1, 84, 8400), dtype=np.float32)]
detections = decode_outputs(outputs, 1280, 720)   # [] – no score above 0.25
```

## Non-maximum suppression

`yolodetect.nms.nms_boxes(boxes, scores, score_threshold, nms_threshold)`
drops scores at or below `score_threshold`. It then keeps boxes greedily,
highest score first. A box is suppressed when its intersection over union
(`iou`) with a box already kept is above `nms_threshold`. The function
returns the indices of the kept boxes. If `boxes` and `scores` differ in
length it raises `ValueError`.

```python
from yolodetect.nms import nms_boxes

keep = nms_boxes([d.box for d in detections],
                 [d.confidence for d in detections], 0.25, 0.45)
```

## Drawing

`yolodetect.render` provides the drawing functions:

- `style_for(width, height)` returns a `DrawStyle`. Its line thickness and
  font scale grow with the shorter side of the image.
- `label_text(name, confidence)` formats a label such as `person: 87%`.
  The percentage is truncated, not rounded.
- `annotate(image, detections, classes)` returns an RGB copy of the image.
  Each detection gets a green box and a label. Detections whose class id is
  not an index into `classes` are skipped.
- `draw_message(image, message)` returns an RGB copy with a red message
  near the top-left corner.

## Running a network

`yolodetect.pipeline.blob_from_image(image, size=640)` prepares the network
input. It resizes the image bilinearly to a square, converts it to RGB and
scales it to [0, 1]. The result is a `1×3×size×size` float32 array.

`Detector(net, classes=None)` puts the steps together. `net` is any callable
that takes the blob and returns one output array or a sequence of them.
`classes` defaults to the 80 COCO class names in
`yolodetect.pipeline.COCO_CLASSES`. Both methods accept a Pillow image or a
path to an image file:

- `detect(image)` returns the detections that remain after suppression,
  with a score threshold of 0.25 and an IoU threshold of 0.45, best first.
- `process_image(image)` returns an annotated copy of the image. If the
  output layout is not supported, the copy reads
  "Unsupported model output format". If nothing is detected, it reads
  "No objects detected".

```python
from yolodetect.pipeline import Detector

detector = Detector(my_network)          # my_network(blob) -> outputs
annotated = detector.process_image("street.jpg")
annotated.save("street-detected.png")
```

## What this package does not do

There is no graphical window, file picker or command-line program. There is
also no model loader. The package does not read ONNX or other model files
and does not run inference itself. You supply the network as a callable.