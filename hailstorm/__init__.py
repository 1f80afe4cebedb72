"""
hailstorm - Hailstone Path Crossings

Counts where hailstone trajectories cross inside a target area with a
Bentley-Ottmann sweep line.

Modules:
    core: Points, lines, segments, rays, target area and trajectory parsing
    algorithms: Sweep-line and brute-force crossing counts
    utils: Tolerance helpers, YAML configuration and matplotlib plots
"""

__version__ = "1.0.0"
