[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yolodetect"
version = "0.1.0"
description = "Decode YOLO-style detector outputs, suppress overlapping boxes and draw labelled results"
requires-python = ">=3.10"
keywords = ["yolo", "object detection", "nms", "coco", "bounding boxes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["yolodetect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
