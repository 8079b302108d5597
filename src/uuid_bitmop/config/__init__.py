from .config import BitmopConfig
from . import constants

__all__ = ['BitmopConfig', 'constants']
