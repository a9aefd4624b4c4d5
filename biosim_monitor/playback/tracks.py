# playback/tracks.py
import logging
import os

from biosim_monitor import params

logger = logging.getLogger(__name__)


def get_tracks(directory, extensions=params.AUDIO_EXTENSIONS):
    """
    Список аудиофайлов в директории (без учёта регистра расширения).
    Отсутствующая директория -> FileNotFoundError.
    """
    extensions = tuple(ext.lower() for ext in extensions)
    tracks = sorted(
        f for f in os.listdir(directory)
        if f.lower().endswith(extensions) and os.path.isfile(os.path.join(directory, f))
    )
    logger.info(f"🎼 Найдено треков: {len(tracks)} в {directory}")
    return tracks
