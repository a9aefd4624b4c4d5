# analysis/spectral.py
"""
Спектрограмма аудиобуфера для нижней панели монитора.
"""
import numpy as np
from scipy.signal import spectrogram

from biosim_monitor import params


def compute_spectrogram(audio, fs=params.FS_AUDIO, nperseg=params.SPEC_NPERSEG,
                        noverlap=params.SPEC_NOVERLAP, max_freq=params.SPEC_MAX_FREQ):
    """
    Спектрограмма в дБ, обрезанная сверху по частоте.

    Аргументы:
        audio (np.ndarray): Весь аудиобуфер (пересчитывается с нуля на каждом кадре).
        max_freq (float): Верхняя граница частоты (Гц).

    Возвращает:
        (f, t, Sxx_db)
    """
    f, t_spec, Sxx = spectrogram(np.asarray(audio, dtype=float), fs=fs,
                                 nperseg=nperseg, noverlap=noverlap)
    Sxx_db = 10 * np.log10(Sxx + params.SPEC_FLOOR)

    # Оставляем только 0..max_freq
    freq_mask = f <= max_freq
    return f[freq_mask], t_spec, Sxx_db[freq_mask, :]
