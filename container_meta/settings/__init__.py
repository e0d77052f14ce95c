"""Настройки container-meta."""
