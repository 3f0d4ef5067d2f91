
"""Logging setup"""
import logging

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logging(level="INFO"):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=FORMAT)
