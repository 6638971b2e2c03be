"""Runnable examples of the classic creational, structural and behavioural design patterns."""

__version__ = "0.1.0"