# streaming/buffers.py
"""
Скользящие буферы и передача снимков аудиобуфера между потоками.

Аудиобуфер принадлежит только потоку плеера. Поток отрисовки получает
неизменяемые копии через SnapshotChannel, поэтому общих изменяемых данных нет.
"""
import logging
import queue

import numpy as np

from biosim_monitor import params
from biosim_monitor.analysis.filters import StreamingLowpass

logger = logging.getLogger(__name__)


def _frozen_copy(values):
    copy = np.array(values, dtype=float, copy=True)
    copy.setflags(write=False)
    return copy


class RollingBuffer:
    """Массив фиксированной длины: сдвиг влево и добавление в конец."""

    def __init__(self, size, fill=0.0):
        if size <= 0:
            raise ValueError(f"Размер буфера должен быть положительным: {size}")
        self._data = np.full(int(size), fill, dtype=float)

    def __len__(self):
        return len(self._data)

    @property
    def values(self):
        view = self._data.view()
        view.setflags(write=False)
        return view

    def push(self, value):
        self._data = np.roll(self._data, -1)
        self._data[-1] = value

    def extend(self, values):
        values = np.asarray(values, dtype=float).ravel()
        n = len(values)
        if n == 0:
            return
        if n >= len(self._data):
            # Кусок длиннее буфера: остаются только самые свежие отсчёты
            self._data = values[-len(self._data):].copy()
            return
        self._data = np.roll(self._data, -n)
        self._data[-n:] = values

    def snapshot(self):
        return _frozen_copy(self._data)


class SnapshotChannel:
    """
    Ограниченный канал один-писатель/один-читатель для снимков буфера.
    При переполнении выбрасывается самый старый снимок.
    """

    def __init__(self, maxsize=1):
        self._queue = queue.Queue(maxsize=maxsize)
        self.dropped = 0

    def publish(self, values):
        snapshot = _frozen_copy(values)
        while True:
            try:
                self._queue.put_nowait(snapshot)
                return
            except queue.Full:
                try:
                    self._queue.get_nowait()
                    self.dropped += 1
                except queue.Empty:
                    pass

    def latest(self):
        """Забирает все снимки и возвращает самый новый (или None)."""
        snapshot = None
        while True:
            try:
                snapshot = self._queue.get_nowait()
            except queue.Empty:
                return snapshot


class AudioFeed:
    """Сторона плеера: фильтрует куски звука, копит их и публикует снимки."""

    def __init__(self, channel, fs=params.FS_AUDIO, seconds=params.AUDIO_BUFFER_SECONDS,
                 cutoff=params.LOWPASS_CUTOFF, order=params.LOWPASS_ORDER):
        self.channel = channel
        self.fs = fs
        self.buffer = RollingBuffer(int(fs * seconds))
        self.lowpass = StreamingLowpass(cutoff=cutoff, fs=fs, order=order)
        self.chunks = 0

    def add_audio_data(self, data):
        filtered = self.lowpass(data)
        self.buffer.extend(filtered)
        self.channel.publish(self.buffer.values)
        self.chunks += 1
        logger.debug(f"Кусок #{self.chunks}: {len(filtered)} отсчётов")
