import sys

import numpy as np

import math_engine
from configuration import AccuracyConfig
from metrics import sample_trig, sample_sqrt, sample_rotations, calculate_errors, check_properties
from quaternion import Quaternion
from vector import Vector3


def demo_rotation():
    """Поворот (1, 0, 0) на 90° вокруг оси Y."""
    q = Quaternion.from_axis_angle(math_engine.PI / 2, Vector3(0.0, 1.0, 0.0))
    v = Vector3(1.0, 0.0, 0.0)
    r = q.rotate(v)
    print(f"  q = {q}")
    print(f"  q.rotate({v}) = {r}  (ожидается ~(0, 0, -1))")


def print_errors(title: str, errors: dict):
    print(f"\n{title}:")
    for name, e in errors.items():
        print(f"  {name:>8}: max |ошибка| = {e['max_abs']:.3e}, СКО = {e['rmse']:.3e}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    # 1. Инициализация конфигурации
    config = AccuracyConfig()

    # 2. Тригонометрия на сетке углов
    print("Проверка sin/cos/tan (ряд Тейлора)...")
    df_trig = sample_trig(config)
    print_errors("Ошибки против numpy", calculate_errors(df_trig, [('sin', 'sin_ref'), ('cos', 'cos_ref')]))

    # tan сравниваем вдали от асимптот
    df_tan = df_trig[np.abs(df_trig['cos_ref']) > 0.1]
    print_errors("tan (|cos| > 0.1)", calculate_errors(df_tan, [('tan', 'tan_ref')]))

    # 3. Квадратный корень
    print("\nПроверка sqrt (Ньютон-Рафсон)...")
    df_sqrt = sample_sqrt(config)
    print_errors("Ошибки против numpy", calculate_errors(df_sqrt, [('sqrt', 'sqrt_ref')]))

    # 4. Случайные вращения
    print(f"\nПроверка {config.n_rotations} случайных вращений...")
    df_rot = sample_rotations(config)
    print(f"  max |ошибка длины| = {np.max(np.abs(df_rot['len_err'])):.3e}")
    print(f"  max ‖r - r_ref‖    = {np.max(df_rot['ref_err']):.3e}")
    print(f"  max |q q^-1 - 1|   = {np.max(df_rot['inverse_err']):.3e}")

    print("\nПример:")
    demo_rotation()

    # 5. Итог
    props = check_properties(df_trig, df_sqrt, df_rot, config)
    print("\nКонтрольные свойства:")
    for name, ok in props.items():
        print(f"  [{'PASS' if ok else 'FAIL'}] {name}")

    if '--plot' in argv:
        from graph import plot_trig_errors, plot_sqrt_errors, plot_rotation_errors
        print("\nПостроение графиков...")
        plot_trig_errors(df_trig)
        plot_sqrt_errors(df_sqrt)
        plot_rotation_errors(df_rot)

    return 0 if all(props.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
