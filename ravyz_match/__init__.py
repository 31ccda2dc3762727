"""Psychometric candidate/job matching engine.

Scores a 30-question career assessment into four pillars, classifies a
career archetype, and combines behavioral, experience and skills fit into
one explainable compatibility score.
"""

__version__ = "0.1.0"
