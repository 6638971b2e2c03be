"""Visitor pattern: rooms dispatch to visitors that decide what happens."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Room(ABC):
    """An element that can be visited."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Let the visitor act on this room."""


class BedRoom(Room):
    def accept(self, visitor: Visitor) -> None:
        print("BedRoom is being visited...")
        visitor.visit_bed_room(self)


class LivingRoom(Room):
    def accept(self, visitor: Visitor) -> None:
        print("BedRoom is being visited...")
        visitor.visit_living_room(self)


class Visitor(ABC):
    """Has one operation per kind of room."""

    @abstractmethod
    def visit_bed_room(self, room: Room) -> str:
        """Act on a bedroom."""

    @abstractmethod
    def visit_living_room(self, room: Room) -> str:
        """Act on a living room."""


class _ScriptedVisitor(Visitor):
    """A visitor that prints and returns a fixed line for each room."""

    bed_room_line = ""
    living_room_line = ""

    def visit_bed_room(self, room: Room) -> str:
        print(self.bed_room_line)
        return self.bed_room_line

    def visit_living_room(self, room: Room) -> str:
        print(self.living_room_line)
        return self.living_room_line


class OwnerVisitor(_ScriptedVisitor):
    bed_room_line = "I am going to sleep"
    living_room_line = "I am going to watch TV"


class ParentVisitor(_ScriptedVisitor):
    bed_room_line = "Mom is tiding up my bedroom"
    living_room_line = "Dad is sitting in my sofa and watching TV"


class FriendVisitor(_ScriptedVisitor):
    bed_room_line = "My friend is visiting my bedroom"
    living_room_line = "My friend and I are playing e-game together"