"""Core domain layer - entities, interfaces, validation and exceptions."""

from stockroom.core import entities, exceptions, interfaces, validation

__all__ = ["entities", "interfaces", "exceptions", "validation"]
