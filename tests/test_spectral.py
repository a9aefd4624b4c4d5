"""Тесты спектрограммы."""

import numpy as np

from biosim_monitor import params
from biosim_monitor.analysis.spectral import compute_spectrogram


def test_frequency_range_limited() -> None:
    """Частоты выше max_freq отбрасываются."""
    f, t_spec, Sxx_db = compute_spectrogram(np.zeros(params.FS_AUDIO * 2))
    assert f.max() <= params.SPEC_MAX_FREQ
    assert Sxx_db.shape == (len(f), len(t_spec))


def test_silence_is_at_floor() -> None:
    """Тишина даёт уровень 10*log10(floor) = -100 дБ."""
    _, _, Sxx_db = compute_spectrogram(np.zeros(params.FS_AUDIO))
    np.testing.assert_allclose(Sxx_db, -100.0)


def test_tone_peak_at_tone_frequency() -> None:
    """Максимум мощности у тона 440 Гц."""
    fs = params.FS_AUDIO
    t = np.arange(fs * 2) / fs
    f, _, Sxx_db = compute_spectrogram(np.sin(2 * np.pi * 440 * t))
    peak = f[Sxx_db.mean(axis=1).argmax()]
    assert abs(peak - 440) <= fs / params.SPEC_NPERSEG
