"""
odoosearch - search and browse Odoo records from the terminal
"""

from loguru import logger

__version__ = "0.1.0"
__logo__ = "🔎"

logger.disable("odoosearch")
