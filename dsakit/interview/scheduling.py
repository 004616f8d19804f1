"""Greedy allocation problems: meeting rooms, courses, server tasks and volunteers."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Meeting:
    """A meeting from ``start`` to ``end`` needing the listed room features."""

    start: int
    end: int
    features: Sequence[str] = ()


@dataclass(frozen=True)
class Room:
    """A bookable room and the features it offers."""

    id: str
    features: Sequence[str] = ()


@dataclass(frozen=True)
class Student:
    """A student with completed courses and course wishes in order of preference."""

    id: str
    completed: Sequence[str] = ()
    preferences: Sequence[str] = ()


@dataclass(frozen=True)
class Course:
    """A course with its prerequisites and number of places."""

    id: str
    required: Sequence[str] = ()
    capacity: int = 0


@dataclass(frozen=True)
class Task:
    """A task needing ``ram`` GB on a server running ``os`` that offers a service."""

    id: int
    ram: int
    os: str
    required_service: str


@dataclass(frozen=True)
class Server:
    """A server with its operating system, memory and supported services."""

    id: str
    os: str
    ram_capacity: int
    ram_used: int = 0
    supported_services: Sequence[str] = ()


@dataclass(frozen=True)
class Question:
    """A question with topic tags."""

    id: str
    tags: Sequence[str] = ()
    title: str = ""


@dataclass(frozen=True)
class Volunteer:
    """A volunteer with the topics they answer, in order of preference."""

    name: str
    topics: Sequence[str] = ()


def allocate_meeting_rooms(meetings: Iterable[Meeting], rooms: Iterable[Room]) -> int:
    """Number of distinct rooms used to hold every meeting, or -1 if one cannot be held.

    Meetings are taken by start time; each gets the free room with the fewest
    features that offers everything it needs. A room is free again once its
    meeting has ended.
    """
    ordered = sorted(meetings, key=lambda meeting: meeting.start)
    ranked = sorted(rooms, key=lambda room: len(room.features))
    rank = {room.id: position for position, room in enumerate(ranked)}
    offers = {room.id: frozenset(room.features) for room in ranked}

    free = [room.id for room in ranked]
    busy: list[tuple[int, int, str]] = []
    used: set[str] = set()
    for meeting in ordered:
        while busy and busy[0][0] <= meeting.start:
            _, _, room_id = heapq.heappop(busy)
            bisect.insort(free, room_id, key=rank.__getitem__)
        needed = set(meeting.features)
        room_id = next((rid for rid in free if needed <= offers[rid]), None)
        if room_id is None:
            return -1
        free.remove(room_id)
        heapq.heappush(busy, (meeting.end, rank[room_id], room_id))
        used.add(room_id)
    return len(used)


def allot_courses(students: Iterable[Student], courses: Iterable[Course]) -> dict[str, str]:
    """Map each student to their first preferred course with room and met prerequisites.

    Students are served in the order given. Raises KeyError for a preference
    naming an unknown course.
    """
    catalogue = {course.id: course for course in courses}
    places = {course_id: course.capacity for course_id, course in catalogue.items()}
    allotments: dict[str, str] = {}
    for student in students:
        completed = set(student.completed)
        for preferred in student.preferences:
            course = catalogue.get(preferred)
            if course is None:
                raise KeyError(f"unknown course {preferred!r}")
            if places[preferred] <= 0:
                continue
            if set(course.required) <= completed:
                places[preferred] -= 1
                allotments[student.id] = course.id
                break
    return allotments


def allot_tasks(tasks: Iterable[Task], servers: Sequence[Server]) -> dict[int, str]:
    """Map each task to the first capable server; tasks with none are left out.

    A server is capable if it runs the task's OS, supports its service and has
    enough free memory, counting the tasks already placed on it.
    """
    used = [server.ram_used for server in servers]
    services = [frozenset(server.supported_services) for server in servers]
    allotments: dict[int, str] = {}
    for task in tasks:
        for index, server in enumerate(servers):
            if (
                task.os == server.os
                and task.ram <= server.ram_capacity - used[index]
                and task.required_service in services[index]
            ):
                used[index] += task.ram
                allotments[task.id] = server.id
                break
    return allotments


def assign_volunteers(
    questions: Sequence[Question], volunteers: Iterable[Volunteer]
) -> dict[str, str]:
    """Map question ids to volunteer names; each volunteer takes at most one question.

    Volunteers pick, by their topic order, the first open question tagged with it.
    """
    assignments: dict[str, str] = {}
    for volunteer in volunteers:
        question = next(
            (
                question
                for topic in volunteer.topics
                for question in questions
                if question.id not in assignments and topic in question.tags
            ),
            None,
        )
        if question is not None:
            assignments[question.id] = volunteer.name
    return assignments