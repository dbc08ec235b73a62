"""
VaxQueue: city-scale vaccination intake model.
Assigns unvaccinated, age-eligible inhabitants to their nearest clinic queue
and reports lineups, wait times and a block map per city.

Single-document workflow: the JSON city map IS the source of truth.
"""

__version__ = "1.0.0"
