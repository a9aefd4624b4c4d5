"""
Биосимулятор-монитор: ЭКГ, ВЧД и спектрограмма звука во время проигрывания музыки.
"""

__version__ = "0.1.0"
