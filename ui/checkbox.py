"""
Checkbox widget for the developer console.

A checkbox exposes two capabilities: its visual state (``checked``) and a change
notification (``on_checked_change``). Checkbox is the one widget implementing
them; Streamlit only draws it and reports clicks back through set_checked().
"""
from typing import Callable, Optional, Protocol

import streamlit as st

CheckedChange = Callable[[bool], None]


class CheckboxControl(Protocol):
    checked: bool
    on_checked_change: Optional[CheckedChange]

    def set_checked(self, value: bool) -> None:
        ...


class Checkbox:
    def __init__(self, checked: bool = False, on_checked_change: Optional[CheckedChange] = None, disabled: bool = False):
        self.checked = bool(checked)
        self.on_checked_change = on_checked_change
        self.disabled = disabled

    def set_checked(self, value: bool) -> None:
        """Update the state; the callback fires only on an actual change."""
        value = bool(value)
        if value == self.checked:
            return
        self.checked = value
        if self.on_checked_change is not None:
            self.on_checked_change(value)

    def toggle(self) -> None:
        self.set_checked(not self.checked)

    def render(self, label: str, key: str, help: str | None = None) -> bool:
        """Draw with Streamlit; returns the current state."""
        if key in st.session_state:
            # Streamlit already holds the widget value from the last rerun.
            self.checked = bool(st.session_state[key])
            value = st.checkbox(label, key=key, help=help, disabled=self.disabled,
                                on_change=self._sync_from_session, args=(key,))
        else:
            value = st.checkbox(label, value=self.checked, key=key, help=help, disabled=self.disabled,
                                on_change=self._sync_from_session, args=(key,))
        return bool(value)

    def _sync_from_session(self, key: str) -> None:
        self.set_checked(st.session_state[key])
