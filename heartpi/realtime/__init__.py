# -*- coding: utf-8 -*-
"""
Live heart-rate feed
"""

from .simulator import FeedConfig, LiveHeartRateFeed

__all__ = [
    'FeedConfig',
    'LiveHeartRateFeed',
]
