"""
Client-side view state for the entry list and the composer.

These objects hold what a UI renders and apply the rule that local state
only changes after the store confirms an operation.
"""
from .request_sequencer import RequestSequencer
from .entry_list_state import EntryListState
from .entry_composer_state import EntryComposerState

__all__ = ["RequestSequencer", "EntryListState", "EntryComposerState"]
