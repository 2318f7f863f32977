"""Ядро симплекс-методу Нелдера–Міда."""
