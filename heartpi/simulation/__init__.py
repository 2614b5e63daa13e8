# -*- coding: utf-8 -*-
"""
Simulation helpers
"""

from .sampler import UniformSampler

__all__ = [
    'UniformSampler',
]
