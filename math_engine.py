# СКАЛЯРНЫЕ ПРИБЛИЖЕНИЯ (float32, без математической библиотеки платформы)

import numpy as np

from configuration import ApproxConfig, DEFAULT_APPROX

f32 = np.float32

PI = f32(3.14159265358979323846)
E = f32(2.71828182845904523536)

_ZERO = f32(0.0)
_ONE = f32(1.0)
_HALF = f32(0.5)
_HALF_PI = PI / f32(2.0)


def sqrt(value: float, cfg: ApproxConfig = DEFAULT_APPROX) -> np.float32:
    """
    Квадратный корень методом Ньютона-Рафсона.
    Старт: x = value, y = 1; шаг: x = (x + y) / 2, y = value / x.
    Для value < 0 возвращает 0 (без ошибки), для value == 0 ровно 0.
    """
    value = f32(value)
    if value <= _ZERO:
        return _ZERO

    tol = f32(cfg.sqrt_tol)
    x, y = value, _ONE
    for _ in range(cfg.max_iter):
        # |x - y|: при value < 1 старт идёт с x < y
        if abs(x - y) <= tol:
            break
        x = _HALF * (x + y)
        y = value / x
    return x


def sin(angle: float, cfg: ApproxConfig = DEFAULT_APPROX) -> np.float32:
    """
    Синус рядом Тейлора в нуле. Без приведения аргумента к [-pi, pi]:
    точность падает с ростом |angle|.
    """
    angle = f32(angle)
    tol = f32(cfg.sin_tol)
    angle_sq = angle * angle

    result = _ZERO
    term = angle
    n = 1
    while abs(term) > tol and n <= cfg.max_iter:
        result += term
        # x^(2n+1)/(2n+1)! -> x^(2n+3)/(2n+3)! со сменой знака
        term *= -angle_sq / f32((2 * n) * (2 * n + 1))
        n += 1
    return result


def cos(angle: float, cfg: ApproxConfig = DEFAULT_APPROX) -> np.float32:
    """cos(a) = sin(a + pi/2)."""
    return sin(f32(angle) + _HALF_PI, cfg)


def tan(angle: float, cfg: ApproxConfig = DEFAULT_APPROX) -> np.float32:
    """sin/cos; при cos == 0 возвращает 0, а не бесконечность."""
    sine = sin(angle, cfg)
    cosine = cos(angle, cfg)
    if cosine == _ZERO:
        return _ZERO
    return sine / cosine
