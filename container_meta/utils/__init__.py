"""Вспомогательные утилиты."""
