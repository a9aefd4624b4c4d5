# recording.py
"""
Сохранение текущего окна ЭКГ/ВЧД в .npy и .csv.
"""
import logging
import os
import re

import numpy as np
import pandas as pd

from biosim_monitor import params

logger = logging.getLogger(__name__)


def save_recording(ecg, icp, directory=params.RECORDINGS_DIR, window_seconds=params.WINDOW_SECONDS):
    """
    Аргументы:
        ecg, icp (array-like): Буферы одинаковой длины.
        directory (str): Куда сохранять (создаётся при необходимости).

    Возвращает:
        str: Базовый путь без расширения, например recordings/biosim_0003.
    """
    ecg = np.asarray(ecg, dtype=np.float32)
    icp = np.asarray(icp, dtype=np.float32)
    if ecg.shape != icp.shape:
        raise ValueError(f"Разная длина буферов: {ecg.shape} и {icp.shape}")

    os.makedirs(directory, exist_ok=True)
    # Номер: максимальный из существующих + 1
    pattern = re.compile(rf"{re.escape(params.RECORDING_BASENAME)}_(\d{{4,}})\.(npy|csv)$")
    taken = [int(m.group(1)) for m in map(pattern.match, os.listdir(directory)) if m]
    idx = max(taken, default=0) + 1
    base_path = os.path.join(directory, f"{params.RECORDING_BASENAME}_{idx:04d}")

    np.save(f"{base_path}.npy", np.stack([ecg, icp], axis=1))

    t = np.linspace(0, window_seconds, len(ecg))
    df = pd.DataFrame({"t": t, "ecg": ecg, "icp": icp})
    df.to_csv(f"{base_path}.csv", index=False)

    logger.info(f"💾 Запись сохранена: {base_path}.npy, {base_path}.csv")
    return base_path
