# main.py
"""
Точка входа: поиск треков, запуск плеера и окна монитора.
"""
import argparse
import logging
import sys
import threading
from functools import partial

import matplotlib
import numpy as np

from biosim_monitor import params
from biosim_monitor.data_generation.signals import synth_audio_chunk
from biosim_monitor.playback.player import init_mixer, start_player
from biosim_monitor.playback.tracks import get_tracks
from biosim_monitor.recording import save_recording
from biosim_monitor.streaming.buffers import AudioFeed, SnapshotChannel

logger = logging.getLogger(__name__)


def setup_logging(log_file=params.LOG_FILE, level="INFO"):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=handlers,
    )


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number: {value}")
    return number


def build_parser():
    ap = argparse.ArgumentParser(prog="biosim-monitor",
                                 description="ECG/ICP simulator with a spectrogram while playing local music.")
    ap.add_argument("--music-dir", default=params.MUSIC_DIR, help="Directory with .mp3/.wav files")
    ap.add_argument("--interval", type=positive_int, default=params.INTERVAL_MS, help="Redraw interval (ms)")
    ap.add_argument("--cutoff", type=positive_float, default=params.LOWPASS_CUTOFF, help="Low-pass cutoff (Hz)")
    ap.add_argument("--order", type=positive_int, default=params.LOWPASS_ORDER, help="Butterworth filter order")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the simulated noise; ICP then follows the tick clock instead of wall time")
    ap.add_argument("--save-gif", default=None, help="Render frames to this GIF instead of opening a window")
    ap.add_argument("--frames", type=positive_int, default=100, help="Frames to render with --save-gif")
    ap.add_argument("--record", action="store_true", help="Save the ECG/ICP window on exit")
    ap.add_argument("--recordings-dir", default=params.RECORDINGS_DIR)
    ap.add_argument("--log-file", default=params.LOG_FILE, help="Empty string for console only")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        tracks = get_tracks(args.music_dir)
    except OSError as e:
        logger.error(f"❌ Нет доступа к директории с музыкой {args.music_dir}: {e}")
        return 1
    if not tracks:
        logger.error("❌ Музыка в директории не найдена.")
        return 1

    if args.save_gif:
        matplotlib.use('Agg')
    # pyplot подтягиваем только после выбора бэкенда
    from biosim_monitor.visualization.monitor import BioMonitor

    icp_rng = audio_rng = None
    if args.seed is not None:
        # Отдельный генератор на каждый поток
        icp_rng, audio_rng = [np.random.default_rng(s) for s in np.random.SeedSequence(args.seed).spawn(2)]

    stop_event = threading.Event()
    channel = SnapshotChannel()
    try:
        feed = AudioFeed(channel, cutoff=args.cutoff, order=args.order)
    except ValueError as e:
        logger.error(f"❌ Неверные параметры фильтра: {e}")
        return 1
    monitor = BioMonitor(channel, stop_event=stop_event, rng=icp_rng, interval=args.interval,
                         tick_clock=args.seed is not None)

    player = None
    mixer = init_mixer()
    if mixer is not None:
        player = start_player(tracks, args.music_dir, feed, stop_event,
                              mixer=mixer, chunk_source=partial(synth_audio_chunk, audio_rng))
    else:
        logger.warning("⚠️ Звук недоступен, спектрограмма останется пустой")

    try:
        if args.save_gif:
            monitor.save(args.save_gif, frames=args.frames)
        else:
            monitor.run()
    finally:
        stop_event.set()
        if player is not None:
            player.join(timeout=1.0)

    if args.record:
        try:
            save_recording(monitor.y_ecg.values, monitor.y_icp.values, directory=args.recordings_dir)
        except Exception as e:
            logger.error(f"❌ Ошибка сохранения записи: {e}")

    monitor.close()
    logger.info("✅ Готово")
    return 0


def cli():
    args, _ = build_parser().parse_known_args()
    setup_logging(args.log_file, args.log_level)
    sys.exit(main())
