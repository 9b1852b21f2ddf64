"""
Base interface for public-scheme (GKV) cost policies.

A policy answers one question per projection year: what is the monthly
public-scheme cost? The engine never branches on the policy type.
"""

from __future__ import annotations


class PublicSchemePolicy:
    """Interface for monthly GKV cost trajectories."""

    name: str = "base"

    def monthly_cost(self, offset: int, age: int, *, adult_1_covered: bool = True) -> float:
        """
        Parameters
        ----------
        offset : int
            Years since the projection start (0 for the first year).
        age : int
            Age of the primary adult in that year.
        adult_1_covered : bool
            Whether the first adult is still within life expectancy.
        """
        raise NotImplementedError

    def describe(self) -> str:
        return self.name
