"""
Stub type synthesis: default values and class construction
"""

from hollow.synthesis.defaults import default_for
from hollow.synthesis.synthesizer import TypeSynthesizer

__all__ = ['default_for', 'TypeSynthesizer']
