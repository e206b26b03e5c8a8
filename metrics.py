# МЕТРИКИ ТОЧНОСТИ ПРИБЛИЖЕНИЙ

import numpy as np
import pandas as pd
from typing import Dict, Iterable, Tuple

import math_engine
from configuration import AccuracyConfig
from quaternion import Quaternion
from vector import Vector3


def sample_trig(cfg: AccuracyConfig) -> pd.DataFrame:
    """sin/cos/tan на равномерной сетке углов и эталон numpy (float64)."""
    angles = np.linspace(cfg.angle_min, cfg.angle_max, cfg.n_angles).astype(np.float32)
    rows = []
    for a in angles:
        s = math_engine.sin(a, cfg.approx)
        c = math_engine.cos(a, cfg.approx)
        rows.append({
            'angle': float(a),
            'sin': float(s), 'cos': float(c), 'tan': float(math_engine.tan(a, cfg.approx)),
            'sin_ref': np.sin(float(a)), 'cos_ref': np.cos(float(a)), 'tan_ref': np.tan(float(a)),
        })
    df = pd.DataFrame(rows)
    df['pythagoras_err'] = df['sin']**2 + df['cos']**2 - 1.0
    return df


def sample_sqrt(cfg: AccuracyConfig) -> pd.DataFrame:
    values = np.linspace(cfg.sqrt_min, cfg.sqrt_max, cfg.n_values).astype(np.float32)
    df = pd.DataFrame({
        'value': values.astype(float),
        'sqrt': [float(math_engine.sqrt(v, cfg.approx)) for v in values],
    })
    df['sqrt_ref'] = np.sqrt(df['value'])
    df['square_err'] = df['sqrt']**2 - df['value']
    return df


def _rodrigues(v: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """Эталонный поворот (формула Родрига, float64)."""
    c, s = np.cos(angle), np.sin(angle)
    return v * c + np.cross(axis, v) * s + axis * np.dot(axis, v) * (1 - c)


def sample_rotations(cfg: AccuracyConfig) -> pd.DataFrame:
    """
    Случайные единичные кватернионы из оси/угла и случайные векторы.
    Для каждой пары: ошибка длины, ошибка против Родрига и ошибка q * q^-1.
    """
    rng = np.random.default_rng(cfg.seed)
    identity = np.array([1.0, 0.0, 0.0, 0.0])

    rows = []
    for _ in range(cfg.n_rotations):
        axis = Vector3(*rng.normal(size=3)).normalize()
        angle = rng.uniform(-np.pi, np.pi)
        v = Vector3(*rng.normal(scale=5.0, size=3))

        q = Quaternion.from_axis_angle(angle, axis)
        r = q.rotate(v)

        v_arr = v.data().astype(float)
        r_arr = r.data().astype(float)
        r_ref = _rodrigues(v_arr, axis.data().astype(float), float(np.float32(angle)))
        qq_inv = (q * q.inverse()).data().astype(float)

        rows.append({
            'angle': angle,
            'vx': v_arr[0], 'vy': v_arr[1], 'vz': v_arr[2],
            'rx': r_arr[0], 'ry': r_arr[1], 'rz': r_arr[2],
            'len_in': np.linalg.norm(v_arr),
            'len_out': np.linalg.norm(r_arr),
            'ref_err': np.linalg.norm(r_arr - r_ref),
            'inverse_err': np.max(np.abs(qq_inv - identity)),
        })
    df = pd.DataFrame(rows)
    df['len_err'] = df['len_out'] - df['len_in']
    return df


def calculate_errors(df: pd.DataFrame, pairs: Iterable[Tuple[str, str]]) -> Dict[str, Dict[str, float]]:
    """Максимальная ошибка и СКО (RMSE) для пар (приближение, эталон)."""
    out = {}
    for approx_col, ref_col in pairs:
        err = df[approx_col] - df[ref_col]
        out[approx_col] = {
            'max_abs': float(np.max(np.abs(err))),
            'rmse': float(np.sqrt(np.mean(err**2))),
        }
    return out


def check_properties(df_trig: pd.DataFrame, df_sqrt: pd.DataFrame, df_rot: pd.DataFrame,
                     cfg: AccuracyConfig) -> Dict[str, bool]:
    """Сводка PASS/FAIL по контрольным свойствам ядра."""
    return {
        'sqrt(v)^2 ~ v': bool(np.all(np.abs(df_sqrt['square_err']) <= cfg.sqrt_sq_tol)),
        'sin^2 + cos^2 ~ 1': bool(np.all(np.abs(df_trig['pythagoras_err']) <= cfg.pythagoras_tol)),
        '|q.rotate(v)| ~ |v|': bool(np.all(np.abs(df_rot['len_err']) <= cfg.rotation_len_tol)),
        'q * q^-1 ~ (1, 0, 0, 0)': bool(np.all(df_rot['inverse_err'] <= cfg.inverse_tol)),
    }
