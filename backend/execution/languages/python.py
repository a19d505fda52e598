"""
Python language support (interpreted, no compile step)
"""

from ..models import Language
from .base import LanguageSpec

PYTHON2 = LanguageSpec(language=Language.PYTHON2, extension='py', interpreter='python2')
PYTHON3 = LanguageSpec(language=Language.PYTHON3, extension='py', interpreter='python3')
