# visualization/monitor.py
"""
Окно монитора: ЭКГ, ВЧД и спектрограмма звука, обновляются по таймеру.
"""
import logging

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation

from biosim_monitor import params
from biosim_monitor.analysis.spectral import compute_spectrogram
from biosim_monitor.data_generation.signals import ecg_sample, generate_ecg, simulate_icp
from biosim_monitor.streaming.buffers import RollingBuffer

logger = logging.getLogger(__name__)


class BioMonitor:

    def __init__(self, channel, stop_event=None, rng=None, fs=params.FS_AUDIO,
                 interval=params.INTERVAL_MS, tick_clock=False):
        self.channel = channel
        self.stop_event = stop_event
        self.rng = rng
        self.fs = fs
        self.interval = interval
        # tick_clock: время ВЧД считается по номеру тика, а не по часам
        self.tick_clock = tick_clock
        self.ani = None

        plt.style.use('dark_background')
        self.fig, self.axs = plt.subplots(3, 1, figsize=(12, 10), gridspec_kw={'height_ratios': [1, 1, 1]})
        self.ax_ecg, self.ax_icp, self.ax_spec = self.axs

        # ЭКГ
        self.ax_ecg.set_title("❤️ ECG Waveform", color='white')
        self.ax_ecg.set_xlim(0, params.WINDOW_SECONDS)
        self.ax_ecg.set_ylim(-1, 3)
        self.line_ecg, = self.ax_ecg.plot([], [], color='lime', lw=2, label='ECG')
        self.ax_ecg.legend(loc='upper right')

        # ВЧД
        self.ax_icp.set_title("🧠 ICP Pressure Waveform (Simulated)", color='deepskyblue')
        self.ax_icp.set_xlim(0, params.WINDOW_SECONDS)
        self.ax_icp.set_ylim(0, 30)
        self.line_icp, = self.ax_icp.plot([], [], color='deepskyblue', lw=2, label='ICP')
        self.ax_icp.legend(loc='upper right')

        # Спектрограмма
        self.ax_spec.set_title("🎵 ICP Spectrogram from Music Audio Frequencies", color='magenta')
        self.ax_spec.set_ylabel('Frequency [Hz]', color='white')
        self.ax_spec.set_xlabel('Time [s]', color='white')
        self.ax_spec.set_ylim(0, params.SPEC_MAX_FREQ)
        self.ax_spec.grid(True, linestyle='--', alpha=0.3)

        self.x = np.linspace(0, params.WINDOW_SECONDS, params.N_POINTS)
        self.y_ecg = RollingBuffer(params.N_POINTS)
        self.y_icp = RollingBuffer(params.N_POINTS)
        self.ecg_wave = generate_ecg()
        self.index = 0

        # До первого снимка от плеера: 2 секунды тишины
        self.audio = np.zeros(int(fs * params.AUDIO_BUFFER_SECONDS))
        self.im_spec = None

        self.fig.canvas.mpl_connect('close_event', self._on_close)

    def update(self, _frame):
        self.y_ecg.push(ecg_sample(self.ecg_wave, self.index))
        t = self.index * params.WINDOW_SECONDS / params.N_POINTS if self.tick_clock else None
        self.y_icp.push(simulate_icp(self.rng, t=t))
        self.index += 1

        self.line_ecg.set_data(self.x, self.y_ecg.values)
        self.line_icp.set_data(self.x, self.y_icp.values)

        snapshot = self.channel.latest()
        if snapshot is not None:
            self.audio = snapshot

        f, t_spec, Sxx_db = compute_spectrogram(self.audio, fs=self.fs)
        if self.im_spec is None:
            self.im_spec = self.ax_spec.pcolormesh(t_spec, f, Sxx_db, shading='gouraud', cmap='magma')
            self.fig.colorbar(self.im_spec, ax=self.ax_spec, label='Power/Frequency (dB/Hz)')
        else:
            # Длина буфера не меняется, сетка t/f та же
            self.im_spec.set_array(Sxx_db)
            self.im_spec.autoscale()

        return self.line_ecg, self.line_icp, self.im_spec

    def _animation(self, frames=None):
        return animation.FuncAnimation(self.fig, self.update, frames=frames,
                                       interval=self.interval, blit=False,
                                       cache_frame_data=False)

    def run(self):
        """Показывает окно, блокирует до его закрытия."""
        self.ani = self._animation()
        plt.tight_layout()
        logger.info("📈 Монитор запущен")
        plt.show()

    def save(self, path, frames, fps=params.GIF_FPS):
        """Рендерит frames кадров в анимированный GIF без окна."""
        self.ani = self._animation(frames=frames)
        plt.tight_layout()
        self.ani.save(path, writer='pillow', fps=fps)
        logger.info(f"✅ Анимация сохранена: {path}")
        return path

    def close(self):
        plt.close(self.fig)

    def _on_close(self, _event):
        logger.info("🪟 Окно монитора закрыто")
        if self.stop_event is not None:
            self.stop_event.set()
