# analysis/filters.py
"""
Фильтр Баттерворта нижних частот для аудиопотока.
"""
import numpy as np
from scipy.signal import butter, sosfilt, sosfilt_zi

from biosim_monitor import params


def butter_lowpass(cutoff, fs, order=params.LOWPASS_ORDER):
    """Фильтр Баттерворта нижних частот (секции второго порядка)."""
    nyquist = 0.5 * fs
    if not 0 < cutoff < nyquist:
        raise ValueError(f"Частота среза {cutoff} Гц вне диапазона (0, {nyquist})")
    normal_cutoff = cutoff / nyquist
    return butter(order, normal_cutoff, btype='low', analog=False, output='sos')


def lowpass_filter(data, cutoff=params.LOWPASS_CUTOFF, fs=params.FS_AUDIO, order=params.LOWPASS_ORDER):
    sos = butter_lowpass(cutoff, fs, order=order)
    return sosfilt(sos, np.asarray(data, dtype=float))


class StreamingLowpass:
    """
    Тот же фильтр, но с сохранением состояния между кусками:
    поток кусков фильтруется так же, как склеенный сигнал целиком.
    """

    def __init__(self, cutoff=params.LOWPASS_CUTOFF, fs=params.FS_AUDIO, order=params.LOWPASS_ORDER):
        self.sos = butter_lowpass(cutoff, fs, order=order)
        self.reset()

    def reset(self):
        # Нулевое начальное состояние: фильтр стартует с тишины
        self._zi = np.zeros_like(sosfilt_zi(self.sos))

    def __call__(self, chunk):
        chunk = np.asarray(chunk, dtype=float)
        if chunk.size == 0:
            return chunk
        y, self._zi = sosfilt(self.sos, chunk, zi=self._zi)
        return y
