"""Тесты фильтра Баттерворта нижних частот."""

import numpy as np
import pytest

from biosim_monitor import params
from biosim_monitor.analysis.filters import StreamingLowpass
from biosim_monitor.analysis.filters import butter_lowpass
from biosim_monitor.analysis.filters import lowpass_filter


def test_silence_in_silence_out() -> None:
    """ФНЧ от тишины даёт тишину."""
    out = lowpass_filter(np.zeros(4096))
    np.testing.assert_array_equal(out, np.zeros(4096))


def test_streaming_silence_in_silence_out() -> None:
    """Потоковый фильтр тоже не создаёт сигнал из тишины."""
    lowpass = StreamingLowpass()
    for _ in range(5):
        assert not np.any(lowpass(np.zeros(2205)))


def test_streaming_matches_one_shot() -> None:
    """Фильтрация кусками совпадает с фильтрацией целого сигнала."""
    rng = np.random.default_rng(3)
    signal = rng.normal(0, 1, 2205 * 4)
    whole = lowpass_filter(signal)

    lowpass = StreamingLowpass()
    pieces = [lowpass(chunk) for chunk in np.split(signal, 4)]
    np.testing.assert_allclose(np.concatenate(pieces), whole, atol=1e-12)


def test_reset_clears_state() -> None:
    """После reset фильтр ведёт себя как новый."""
    chunk = np.random.default_rng(4).normal(0, 1, 1000)
    lowpass = StreamingLowpass()
    first = lowpass(chunk)
    lowpass(chunk)
    lowpass.reset()
    np.testing.assert_allclose(lowpass(chunk), first)


def test_high_frequency_attenuated() -> None:
    """Тон 5 кГц подавляется, тон 100 Гц проходит."""
    fs = params.FS_AUDIO
    t = np.arange(fs) / fs
    low = lowpass_filter(np.sin(2 * np.pi * 100 * t))
    high = lowpass_filter(np.sin(2 * np.pi * 5000 * t))
    # Без переходного процесса в начале
    assert np.abs(low[fs // 2:]).max() > 0.9
    assert np.abs(high[fs // 2:]).max() < 0.01


def test_empty_chunk_passes_through() -> None:
    """Пустой кусок не ломает потоковый фильтр."""
    assert StreamingLowpass()(np.array([])).size == 0


@pytest.mark.parametrize("cutoff", [0, -10, params.FS_AUDIO / 2, 30000])
def test_invalid_cutoff_rejected(cutoff: float) -> None:
    """Частота среза вне (0, fs/2) -> ValueError."""
    with pytest.raises(ValueError):
        butter_lowpass(cutoff, params.FS_AUDIO)
