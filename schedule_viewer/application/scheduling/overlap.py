"""
Overlap clustering for layout.

Groups appointments into maximal runs connected by time overlap. A new
appointment joins the open group when it starts before the latest end time
seen anywhere in that group, not just the end of the previous appointment.
"""

from typing import List, Sequence, TypeVar

from .filters import sort_by_start

A = TypeVar("A")


def group_overlapping(appointments: Sequence[A]) -> List[List[A]]:
    groups: List[List[A]] = []
    current: List[A] = []
    running_end = None

    for appointment in sort_by_start(appointments):
        if current and appointment.start_time < running_end:
            current.append(appointment)
            running_end = max(running_end, appointment.end_time)
            continue
        if current:
            groups.append(current)
        current = [appointment]
        running_end = appointment.end_time

    if current:
        groups.append(current)
    return groups
