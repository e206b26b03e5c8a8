# МАТЕМАТИКА ВРАЩЕНИЙ

import numbers

import numpy as np
from typing import Iterator, Sequence

import math_engine
from vector import Vector3


def quat_mul(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Произведение Гамильтона в порядке [w, x, y, z]; q1*q2 != q2*q1."""
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    return np.array([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2
    ], dtype=np.float32)


class Quaternion:
    """
    Кватернион (w, x, y, z) в float32.

    Без нормировки это просто 4-вектор. Как вращение используется только
    единичный кватернион: rotate() сам ничего не нормирует и не проверяет.
    Конструктор по умолчанию даёт нулевой кватернион, а НЕ тождественное
    вращение (1, 0, 0, 0).
    """

    # Изменяем через data(), поэтому не хэшируем
    __hash__ = None
    # np.float32 * q должен уходить в __rmul__, а не в ufunc numpy
    __array_ufunc__ = None

    def __init__(self, w: float = 0.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([w, x, y, z], dtype=np.float32)

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vector3) -> "Quaternion":
        """
        Вращение на angle [рад] вокруг оси axis.
        Ось должна быть единичной (не проверяется): ошибка длины оси
        напрямую переходит в ошибку длины при вращении.
        """
        half_angle = np.float32(angle) * np.float32(0.5)
        sin_half = math_engine.sin(half_angle)
        return cls(math_engine.cos(half_angle),
                   axis.x * sin_half,
                   axis.y * sin_half,
                   axis.z * sin_half)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Quaternion":
        arr = np.asarray(values, dtype=np.float32).reshape(-1)
        if arr.shape[0] != 4:
            raise ValueError(f"Quaternion требует 4 компоненты [w, x, y, z], получено {arr.shape[0]}.")
        return cls(*arr)

    # --- Компоненты ---
    @property
    def w(self) -> np.float32:
        return self._data[0]

    @w.setter
    def w(self, value: float):
        self._data[0] = value

    @property
    def x(self) -> np.float32:
        return self._data[1]

    @x.setter
    def x(self, value: float):
        self._data[1] = value

    @property
    def y(self) -> np.float32:
        return self._data[2]

    @y.setter
    def y(self, value: float):
        self._data[2] = value

    @property
    def z(self) -> np.float32:
        return self._data[3]

    @z.setter
    def z(self, value: float):
        self._data[3] = value

    def data(self) -> np.ndarray:
        """Прямой доступ к компонентам в порядке [w, x, y, z] (view)."""
        return self._data

    # --- Арифметика ---
    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(self._data + other._data))

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(self._data - other._data))

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(*quat_mul(self._data, other._data))
        if isinstance(other, numbers.Real):
            return Quaternion(*(self._data * np.float32(other)))
        return NotImplemented

    def __rmul__(self, scalar):
        # Сюда попадает только скаляр слева: q*p обрабатывает __mul__
        if isinstance(scalar, numbers.Real):
            return Quaternion(*(self._data * np.float32(scalar)))
        return NotImplemented

    def norm_sq(self) -> np.float32:
        return np.sum(self._data * self._data, dtype=np.float32)

    def magnitude(self) -> np.float32:
        return math_engine.sqrt(self.norm_sq())

    def normalize(self) -> "Quaternion":
        """
        q / |q|. При |q| == 0 возвращает нулевой кватернион (0, 0, 0, 0),
        а не (1, 0, 0, 0).
        """
        mag = self.magnitude()
        if mag == 0.0:
            return Quaternion()
        return Quaternion(*(self._data / mag))

    def conjugate(self) -> "Quaternion":
        w, x, y, z = self._data
        return Quaternion(w, -x, -y, -z)

    def inverse(self) -> "Quaternion":
        """conj(q) / |q|^2; нулевой кватернион при |q|^2 == 0."""
        mag_sq = self.norm_sq()
        if mag_sq == 0.0:
            return Quaternion()
        return self.conjugate() * (np.float32(1.0) / mag_sq)

    def rotate(self, v: Vector3) -> Vector3:
        """Поворот вектора: q * (0, v) * q^-1, берём векторную часть."""
        qv = Quaternion(0.0, v.x, v.y, v.z)
        result = self * qv * self.inverse()
        return Vector3(result.x, result.y, result.z)

    # --- Служебное ---
    def __iter__(self) -> Iterator[np.float32]:
        return iter(self._data)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        w, x, y, z = (float(c) for c in self._data)
        return f"Quaternion(w={w!r}, x={x!r}, y={y!r}, z={z!r})"
