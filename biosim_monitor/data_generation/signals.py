# data_generation/signals.py
"""
Синтетические сигналы для монитора: ЭКГ, ВЧД и "звук" для спектрограммы.
Реальных датчиков нет, все значения генерируются.
"""
import time

import numpy as np

from biosim_monitor import params


def generate_ecg(n_samples=params.ECG_CYCLE_SAMPLES):
    """
    Один цикл ЭКГ: затухающая синусоида плюс узкий пик (QRS).

    Аргументы:
        n_samples (int): Количество отсчётов в цикле.
    """
    t = np.linspace(0, 1, n_samples)
    base = 1.2 * np.sin(2 * np.pi * 3 * t) * np.exp(-4 * t)
    spike = np.where((0.3 < t) & (t < 0.32), 2.5, 0)
    return base + spike


def ecg_sample(ecg_wave, index):
    """Отсчёт ЭКГ по циклическому индексу."""
    return ecg_wave[index % len(ecg_wave)]


def simulate_icp(rng=None, t=None):
    """
    ВЧД: базовая линия + шум + пульсовая волна, обрезанная до [ICP_MIN, ICP_MAX].

    Аргументы:
        rng: Источник случайных чисел с методом normal (по умолчанию np.random).
        t (float): Время в секундах (по умолчанию time.time()).
    """
    if rng is None:
        rng = np.random
    if t is None:
        t = time.time()
    value = (params.ICP_BASELINE
             + rng.normal(0, params.ICP_NOISE_STD)
             + params.ICP_PULSE_AMP * np.sin(t * params.ICP_PULSE_RATE))
    return float(np.clip(value, params.ICP_MIN, params.ICP_MAX))


def synth_audio_chunk(rng=None, duration=params.CHUNK_SECONDS, fs=params.FS_AUDIO,
                      tone_hz=params.TONE_HZ):
    """Синусоида с шумом вместо настоящего звука с трека."""
    if rng is None:
        rng = np.random
    n = int(fs * duration)
    t = np.linspace(0, duration, n, endpoint=False)
    tone = params.TONE_AMP * np.sin(2 * np.pi * tone_hz * t)
    return tone + params.NOISE_AMP * rng.normal(0, 1, n)
