# helpers/dataset.py
"""
Fashion-MNIST CSV loading and prediction files.

Vectors file: one image per line, comma-separated integer pixels 0..255.
Labels file: one integer class label per line, same order as the vectors.
"""
import csv
import os
from typing import List, NamedTuple

import numpy as np

NUM_PIXELS = 28 * 28
NUM_CLASSES = 10


class Sample(NamedTuple):
    pixels: np.ndarray  # (784,), normalized to [0, 1]
    label: int


class DataFormatError(ValueError):
    """A line of a data file could not be parsed."""


def _ensure_parent_dir(path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _parse_pixels(row, path, line_no, num_pixels):
    if len(row) < num_pixels:
        raise DataFormatError(
            f"{path}:{line_no}: expected {num_pixels} pixels, got {len(row)}"
        )
    try:
        pixels = np.array([int(v) for v in row[:num_pixels]], dtype=np.float64)
    except ValueError as e:
        raise DataFormatError(f"{path}:{line_no}: {e}") from e
    return pixels / 255.0


def _parse_label(line, path, line_no, num_classes):
    try:
        label = int(line.strip())
    except ValueError as e:
        raise DataFormatError(f"{path}:{line_no}: {e}") from e
    if not 0 <= label < num_classes:
        raise DataFormatError(
            f"{path}:{line_no}: label {label} outside [0, {num_classes})"
        )
    return label


def load_data(vectors_path, labels_path, num_pixels=NUM_PIXELS,
              num_classes=NUM_CLASSES) -> List[Sample]:
    """
    Reads both files in lockstep, stopping at the end of the shorter one.
    """
    samples = []
    with open(vectors_path, newline="") as fv, open(labels_path) as fl:
        reader = csv.reader(fv)
        for line_no, (row, label_line) in enumerate(zip(reader, fl), start=1):
            pixels = _parse_pixels(row, vectors_path, line_no, num_pixels)
            label = _parse_label(label_line, labels_path, line_no, num_classes)
            samples.append(Sample(pixels, label))
    return samples


def one_hot(label, num_classes=NUM_CLASSES):
    oh = np.zeros(num_classes, dtype=np.float64)
    oh[int(label)] = 1.0
    return oh


def split_validation(samples, val_frac=0.1):
    # first slice is validation, no shuffling
    n_val = int(len(samples) * val_frac)
    return samples[n_val:], samples[:n_val]


def save_predictions(network, samples, path):
    """Writes one predicted class index per line."""
    _ensure_parent_dir(path)
    with open(path, "w", newline="") as f:
        w = csv.writer(f, lineterminator="\n")
        for s in samples:
            w.writerow([network.predict(s.pixels)])
    return path
