"""Mediator pattern: a dialog coordinates its widgets when one changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class WidgetId(IntEnum):
    DIRECTORY_LIST = 0
    FILE_LIST = 1
    FILTER_EDITOR = 2
    SELECTION_EDITOR = 3


class Widget(ABC):
    """A widget that reports its changes to the dialog mediating it."""

    def __init__(self, mediator: FileSelectionDialog, name: str) -> None:
        self._mediator = mediator
        self.name = name

    def changed(self) -> None:
        print("widget changed")
        self._mediator.widget_changed(self)

    @abstractmethod
    def query(self) -> str:
        """React to a change of this widget."""

    @abstractmethod
    def update(self) -> str:
        """React to a change of another widget."""


class ListWidget(Widget):
    def query(self) -> str:
        message = "listwidget query"
        print(message)
        return message

    def update(self) -> str:
        message = "listwidget update"
        print(message)
        return message


class EditWidget(Widget):
    def query(self) -> str:
        message = "editwidget query"
        print(message)
        return message

    def update(self) -> str:
        message = "editwidget update"
        print(message)
        return message


class FileSelectionDialog:
    """Owns four widgets and tells the others when one of them changes."""

    def __init__(self) -> None:
        self._widgets: dict[WidgetId, Widget] = {
            WidgetId.DIRECTORY_LIST: ListWidget(self, "DirectoryList"),
            WidgetId.FILE_LIST: ListWidget(self, "FileList"),
            WidgetId.FILTER_EDITOR: EditWidget(self, "FilterEditor"),
            WidgetId.SELECTION_EDITOR: EditWidget(self, "SelectionEditor"),
        }

    def handle_event(self, which: WidgetId) -> None:
        print(f"handling {self._widgets[which].name}")

    def widget_changed(self, widget: Widget) -> None:
        """Query the changed widget and update the rest; ignore foreign widgets."""
        if not any(own is widget for own in self._widgets.values()):
            return
        for own in self._widgets.values():
            if own is widget:
                own.query()
            else:
                own.update()

    def get_widget(self, which: WidgetId) -> Widget:
        return self._widgets[which]