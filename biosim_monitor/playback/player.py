# playback/player.py
"""
Проигрывание треков через pygame.mixer и подача синтетического звука в AudioFeed.
"""
import logging
import os
import threading

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from biosim_monitor import params
from biosim_monitor.data_generation.signals import synth_audio_chunk

logger = logging.getLogger(__name__)


def init_mixer(fs=params.FS_AUDIO):
    """Инициализирует микшер (моно, 16 бит). None, если звук недоступен."""
    try:
        pygame.mixer.init(frequency=fs, size=-16, channels=1)
        logger.info(f"🔊 Микшер запущен: {fs} Гц")
        return pygame.mixer
    except pygame.error as e:
        logger.error(f"❌ Не удалось запустить микшер: {e}")
        return None


def play_tracks(tracks, music_dir, feed, stop_event, mixer=None,
                chunk_source=synth_audio_chunk, poll_interval=params.CHUNK_SECONDS):
    """
    Играет треки по очереди. Пока трек звучит, на каждой итерации
    в feed уходит один кусок от chunk_source.

    Возвращает количество успешно запущенных треков.
    """
    if mixer is None:
        mixer = pygame.mixer
    played = 0
    logger.info("Запущен поток плеера")
    for track in tracks:
        if stop_event.is_set():
            break
        full_path = os.path.join(music_dir, track)
        logger.info(f"🎶 Играет {track}")
        try:
            mixer.music.load(full_path)
            mixer.music.play()
        except Exception as e:
            logger.warning(f"⚠️ Не удалось проиграть {track}: {e}")
            continue
        played += 1

        while mixer.music.get_busy() and not stop_event.is_set():
            feed.add_audio_data(chunk_source())
            stop_event.wait(poll_interval)

    if stop_event.is_set():
        mixer.music.stop()
        logger.info("⏹️ Плеер остановлен")
    else:
        logger.info("✅ Все треки проиграны")
    return played


def start_player(tracks, music_dir, feed, stop_event, **kwargs):
    thread = threading.Thread(
        target=play_tracks,
        args=(tracks, music_dir, feed, stop_event),
        kwargs=kwargs,
        daemon=True,
        name="biosim-player",
    )
    thread.start()
    return thread
