"""container-meta: получение метаданных контейнера по label-фильтру."""

__version__ = "0.1.0"
