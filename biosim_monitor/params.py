# params.py
import os

# --- Окно отображения ЭКГ / ВЧД ---
WINDOW_SECONDS = 2.0    # Ширина окна на графике (с)
N_POINTS = 1000         # Количество точек в окне
ECG_CYCLE_SAMPLES = 500 # Отсчётов в одном цикле ЭКГ

# --- Модель ВЧД (мм рт. ст.) ---
ICP_BASELINE = 10.0
ICP_NOISE_STD = 2.0
ICP_PULSE_AMP = 2.5
ICP_PULSE_RATE = 2.0    # рад/с, от времени на часах
ICP_MIN = 5.0
ICP_MAX = 25.0

# --- Аудио ---
FS_AUDIO = 44100        # Частота дискретизации (Гц)
AUDIO_BUFFER_SECONDS = 2.0
CHUNK_SECONDS = 0.05    # Длина синтетического куска и период опроса плеера
TONE_HZ = 440.0
TONE_AMP = 0.5
NOISE_AMP = 0.05

# --- Фильтр Баттерворта ---
LOWPASS_CUTOFF = 1000.0
LOWPASS_ORDER = 6

# --- Спектрограмма ---
SPEC_NPERSEG = 1024
SPEC_NOVERLAP = 768
SPEC_MAX_FREQ = 1000.0
SPEC_FLOOR = 1e-10

# --- Анимация ---
INTERVAL_MS = 50
GIF_FPS = 20

# --- Файлы и директории ---
AUDIO_EXTENSIONS = (".mp3", ".wav")
MUSIC_DIR = os.environ.get("BIOSIM_MUSIC_DIR", os.path.join(os.path.expanduser("~"), "Music"))
RECORDINGS_DIR = "recordings"
RECORDING_BASENAME = "biosim"
LOG_FILE = os.environ.get("BIOSIM_LOG_FILE", "biosim_monitor.log")
