"""
Helpers for the viewer's presentational widgets.

Both mirror what the frontend components expect and carry no state of
their own beyond their inputs.
"""

from dataclasses import dataclass
from typing import Callable


def progress_bar_style(percentage: float) -> dict[str, str]:
    """
    Inline style for the filled part of a progress bar.

    Values are not clamped; callers pass 0-100. Whole numbers are
    written without a decimal point, anything else in full.
    """
    value = int(percentage) if float(percentage).is_integer() else percentage
    return {"width": f"{value}%"}


@dataclass
class SyncToggle:
    """
    Toggle between synchronized and independent viewers.

    The owner keeps the synced flag; toggle() only reports the negated
    value through on_toggle.
    """
    is_synced: bool
    on_toggle: Callable[[bool], None]

    def toggle(self) -> None:
        self.on_toggle(not self.is_synced)

    @property
    def label(self) -> str:
        return "Sincronizado" if self.is_synced else "Independiente"
