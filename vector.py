# ВЕКТОРЫ 2D / 3D / 4D

import numbers

import numpy as np
from typing import Iterator, Sequence, Tuple

import math_engine


def _component(index: int, name: str) -> property:
    """Свойство чтения/записи для одной компоненты непрерывного массива."""
    def getter(self) -> np.float32:
        return self._data[index]

    def setter(self, value: float):
        self._data[index] = value

    return property(getter, setter, doc=f"Компонента {name}.")


class BaseVector:
    """
    Вектор фиксированной размерности с покомпонентной арифметикой.
    Компоненты хранятся в непрерывном массиве float32 в объявленном порядке;
    каждая операция возвращает новый объект.
    """
    names: Tuple[str, ...] = ()

    # Изменяем через data(), поэтому не хэшируем
    __hash__ = None
    # np.float32 * v должен уходить в __rmul__, а не в ufunc numpy
    __array_ufunc__ = None

    def __init__(self, *components: float):
        self._data = np.array(components, dtype=np.float32)

    @classmethod
    def from_array(cls, values: Sequence[float]):
        arr = np.asarray(values, dtype=np.float32).reshape(-1)
        if arr.shape[0] != len(cls.names):
            raise ValueError(f"{cls.__name__} требует {len(cls.names)} компонент(ы), получено {arr.shape[0]}.")
        return cls(*arr)

    def _new(self, data: np.ndarray):
        return type(self)(*data)

    def data(self) -> np.ndarray:
        """Прямой доступ к компонентам (view, первая компонента первой)."""
        return self._data

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self._data + other._data)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self._data - other._data)

    def __mul__(self, scalar: float):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._new(self._data * np.float32(scalar))

    __rmul__ = __mul__

    def magnitude(self) -> np.float32:
        return math_engine.sqrt(np.sum(self._data * self._data, dtype=np.float32))

    def normalize(self):
        """Единичный вектор того же направления; нулевой вектор для нулевой длины."""
        mag = self.magnitude()
        if mag == 0.0:
            return type(self)()
        return self._new(self._data / mag)

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self.names)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        comps = ", ".join(f"{n}={float(v)!r}" for n, v in zip(self.names, self._data))
        return f"{type(self).__name__}({comps})"


class Vector2(BaseVector):
    names = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        super().__init__(x, y)

    x = _component(0, "x")
    y = _component(1, "y")


class Vector3(BaseVector):
    names = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")


class Vector4(BaseVector):
    names = ("x", "y", "z", "w")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        super().__init__(x, y, z, w)

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")
