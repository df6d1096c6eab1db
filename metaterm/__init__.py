"""
metaterm
========

Metaballs in a character terminal.

A few balls drift across the screen and bounce off its edges.  Each ball
radiates an inverse-distance field ``r / d``; the fields add up, and the
terminal grid samples the sum at every cell corner:

  - Corners where the field is below 1.0 are outside every blob
  - Cells whose corners disagree sit on a blob's edge and get drawn
  - Blobs merge and split as their fields overlap

The animation runs at a fixed frame rate until interrupted.
"""

__version__ = "1.0.0"
__author__ = "metaterm"
