"""Change notification for mutable value objects (Observer Pattern)"""
from typing import Any, Callable, List

from common_extensions.core.enums import PropertyName

PropertyChangedCallback = Callable[[Any, PropertyName], None]


class PropertyChangedNotifier:
    """
    Base class for value objects that announce property changes

    Owners register callbacks that receive ``(sender, property_name)``
    after every assignment, including derived properties recomputed as a
    side effect.
    """

    def __init__(self):
        self._property_changed_callbacks: List[PropertyChangedCallback] = []

    def subscribe(self, callback: PropertyChangedCallback) -> None:
        """Register a callback for property changes"""
        self._property_changed_callbacks.append(callback)

    def unsubscribe(self, callback: PropertyChangedCallback) -> None:
        """Remove a previously registered callback, if present"""
        if callback in self._property_changed_callbacks:
            self._property_changed_callbacks.remove(callback)

    def _on_property_changed(self, *property_names: PropertyName) -> None:
        for property_name in property_names:
            for callback in list(self._property_changed_callbacks):
                callback(self, property_name)
