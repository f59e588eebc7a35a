"""
Single-active-selection state.

Holds exactly one active label out of a finite set (editor tabs, display
modes). There is no "nothing selected" state: a SelectionState always has
a current value from the moment it is created.

Usage:
    tabs = SelectionState(EditorTab.INFO)
    tabs.switch_to(EditorTab.VIEWS)
    tabs.is_active(EditorTab.VIEWS)   # True
"""

from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

from exceptions import InvalidSelectionError

T = TypeVar("T", bound=str)

Observer = Callable[[T], None]


class EditorTab(str, Enum):
    """Tabs of the project editor."""
    INFO = "info"
    VIEWS = "views"
    PRODUCTS = "products"


class DisplayMode(str, Enum):
    """How a product gallery is laid out."""
    LIST = "list"
    GRID = "grid"


class SelectionState(Generic[T]):
    """
    Track one active value among a finite set of labels.

    Args:
        initial: Active value at creation
        options: Allowed values. Defaults to every member of initial's
            enum; plain string labels without options are not checked.
    """

    def __init__(self, initial: T, options: Optional[Iterable[T]] = None):
        self._enum_type = type(initial) if isinstance(initial, Enum) else None

        if options is not None:
            self._options: Optional[tuple[T, ...]] = tuple(
                self._member(option) for option in options
            )
        elif self._enum_type is not None:
            self._options = tuple(self._enum_type)
        else:
            self._options = None

        self._observers: list[Observer] = []
        self._current: T = self._coerce(initial)

    @property
    def current(self) -> T:
        return self._current

    @property
    def options(self) -> Optional[tuple[T, ...]]:
        return self._options

    def switch_to(self, value: T) -> None:
        """
        Make value the active one.

        Switching to the value that is already active is allowed and
        still notifies observers.
        """
        self._current = self._coerce(value)
        for observer in list(self._observers):
            observer(self._current)

    def is_active(self, value: T) -> bool:
        return self._current == value

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Call observer with the new value after every switch.

        Returns:
            Function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _member(self, option: T) -> T:
        """Turn a supplied option into a member of the label enum."""
        if self._enum_type is None or isinstance(option, self._enum_type):
            return option
        try:
            return self._enum_type(option)
        except ValueError:
            raise InvalidSelectionError(option, list(self._enum_type))

    def _coerce(self, value: T) -> T:
        if self._options is not None and value not in self._options:
            raise InvalidSelectionError(value, list(self._options))
        if self._enum_type is not None and not isinstance(value, self._enum_type):
            return self._enum_type(value)
        return value

    def __repr__(self) -> str:
        return f"SelectionState(current={self._current!r})"
