"""
memesim: a loss-biased meme coin market simulator.
"""

__version__ = "0.1.0"
