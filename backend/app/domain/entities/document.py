"""Coordinates used to place content on a rendered document page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    """A pair of points in page units.

    For a label/value pair the start point is the label origin and the end
    point is the value origin. For a line they are the two endpoints.
    """

    start_x: float
    start_y: float
    end_x: float
    end_y: float
