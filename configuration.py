# КОНФИГУРАЦИЯ ПРИБЛИЖЕНИЙ И ПРОВЕРКИ ТОЧНОСТИ

from dataclasses import dataclass, field


@dataclass
class ApproxConfig:
    sqrt_tol: float = 1e-5   # Остановка Ньютона-Рафсона: |x - y| <= sqrt_tol
    sin_tol: float = 1e-6    # Остановка ряда Тейлора: |член ряда| <= sin_tol
    # Предел итераций. В float32 пара (x, y) может застрять на расстоянии
    # одного ulp (> sqrt_tol при значениях выше ~1.6e4), а ряд синуса
    # переполняется до inf при больших углах.
    max_iter: int = 256


DEFAULT_APPROX = ApproxConfig()


@dataclass
class AccuracyConfig:
    # Сетка углов для sin/cos/tan [рад]
    angle_min: float = -3.14159265
    angle_max: float = 3.14159265
    n_angles: int = 721

    # Сетка значений для sqrt
    sqrt_min: float = 0.0
    sqrt_max: float = 10.0
    n_values: int = 1001

    # Случайные вращения
    n_rotations: int = 500
    seed: int = 42

    # Допуски для PASS/FAIL
    sqrt_sq_tol: float = 1e-4        # |sqrt(v)^2 - v|
    pythagoras_tol: float = 1e-4     # |sin^2 + cos^2 - 1|
    rotation_len_tol: float = 1e-3   # ||q.rotate(v)|| - ||v||
    inverse_tol: float = 1e-3        # q * q^-1 против (1, 0, 0, 0)

    approx: ApproxConfig = field(default_factory=ApproxConfig)
