"""
Archery - timed target practice.

Two variants share one core (``bullseye``):
- slide: bow slides along the bottom, target jumps around the upper half
- aim: bow sits at the left edge and aims at the pointer, target bounces
  up and down on the right, obstacles appear from level 3
"""
