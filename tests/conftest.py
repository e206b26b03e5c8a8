import os
import sys

import numpy as np
import pytest

# Модули лежат в корне репозитория (плоская раскладка)
_TEST_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_TEST_DIR, ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from quaternion import Quaternion  # noqa: E402
from vector import Vector3  # noqa: E402


@pytest.fixture
def rng():
    """Генератор случайных чисел с фиксированным seed."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_rotations(rng):
    """Список (ось, угол, кватернион) для случайных единичных осей."""
    out = []
    for _ in range(25):
        axis_np = rng.normal(size=3)
        axis_np /= np.linalg.norm(axis_np)
        axis = Vector3(*axis_np)
        angle = float(rng.uniform(-np.pi, np.pi))
        out.append((axis, angle, Quaternion.from_axis_angle(angle, axis)))
    return out


@pytest.fixture
def random_vectors(rng):
    return [Vector3(*rng.normal(scale=3.0, size=3)) for _ in range(25)]
