# inator_studio/__init__.py
"""
Inator Studio Backend - whimsical -inator name generator with on-disk history.
"""
__version__ = "1.0.0"
