# ВИЗУАЛИЗАЦИЯ ОШИБОК ПРИБЛИЖЕНИЙ

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def plot_trig_errors(df_trig: pd.DataFrame, show: bool = True):
    """
    Строит графики:
    1. sin/cos приближения поверх эталона numpy
    2. Ошибки sin, cos и sin^2 + cos^2 - 1
    """
    plt.style.use('bmh')

    fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    fig.suptitle('Ряд Тейлора: sin / cos (float32)', fontsize=14)

    ax = axes[0]
    ax.plot(df_trig['angle'], df_trig['sin_ref'], 'k-', linewidth=1.5, label='sin (numpy)')
    ax.plot(df_trig['angle'], df_trig['sin'], 'r--', label='sin (Тейлор)')
    ax.plot(df_trig['angle'], df_trig['cos_ref'], 'k:', linewidth=1.5, label='cos (numpy)')
    ax.plot(df_trig['angle'], df_trig['cos'], 'b--', label='cos (Тейлор)')
    ax.set_ylabel('Значение')
    ax.legend(loc='right')
    ax.grid(True)

    ax = axes[1]
    ax.plot(df_trig['angle'], df_trig['sin'] - df_trig['sin_ref'], 'r-', label='sin')
    ax.plot(df_trig['angle'], df_trig['cos'] - df_trig['cos_ref'], 'b-', label='cos')
    ax.plot(df_trig['angle'], df_trig['pythagoras_err'], 'g-', label='sin² + cos² - 1')
    ax.set_ylabel('Ошибка')
    ax.set_xlabel('Угол [рад]')
    ax.legend(loc='right')
    ax.grid(True)

    plt.tight_layout()
    if show:
        plt.show()
    return fig


def plot_sqrt_errors(df_sqrt: pd.DataFrame, show: bool = True):
    plt.style.use('bmh')

    fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    fig.suptitle('Ньютон-Рафсон: sqrt (float32)', fontsize=14)

    ax = axes[0]
    ax.plot(df_sqrt['value'], df_sqrt['sqrt_ref'], 'k-', linewidth=1.5, label='numpy')
    ax.plot(df_sqrt['value'], df_sqrt['sqrt'], 'r--', label='Ньютон-Рафсон')
    ax.set_ylabel('sqrt(v)')
    ax.legend()
    ax.grid(True)

    ax = axes[1]
    ax.plot(df_sqrt['value'], df_sqrt['sqrt'] - df_sqrt['sqrt_ref'], 'r-', label='sqrt(v) - эталон')
    ax.plot(df_sqrt['value'], df_sqrt['square_err'], 'b-', label='sqrt(v)² - v')
    ax.set_ylabel('Ошибка')
    ax.set_xlabel('v')
    ax.legend()
    ax.grid(True)

    plt.tight_layout()
    if show:
        plt.show()
    return fig


def plot_rotation_errors(df_rot: pd.DataFrame, show: bool = True):
    """Ошибки вращения по углу поворота: длина, Родриг, q * q^-1."""
    plt.style.use('bmh')

    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)
    fig.suptitle('Вращение кватернионом (float32)', fontsize=14)

    angle_deg = np.degrees(df_rot['angle'])
    panels = [
        ('len_err', '|q v q⁻¹| - |v|', 'Сохранение длины'),
        ('ref_err', '‖r - r_ref‖', 'Отклонение от формулы Родрига'),
        ('inverse_err', 'max |q q⁻¹ - 1|', 'Обратный кватернион'),
    ]
    for ax, (col, ylabel, title) in zip(axes, panels):
        ax.plot(angle_deg, df_rot[col], '.', markersize=4, alpha=0.6)
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True)
    axes[-1].set_xlabel('Угол [град]')

    plt.tight_layout()
    if show:
        plt.show()
    return fig
