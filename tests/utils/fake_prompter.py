"""Test helper: prompter with scripted answers."""
from shtoolset.models.script_model import ConfirmationResult


class FakePrompter:
    """Decision points with scripted answers; records what was asked."""

    def __init__(self, continue_answers=(), selections=(), confirmations=(), random_confirmations=()):
        self.continue_answers = list(continue_answers)
        self.selections = list(selections)
        self.confirmations = list(confirmations)
        self.random_confirmations = list(random_confirmations)
        self.continue_asked = 0
        self.pauses = 0
        self.previous_seen = []
        self.confirmed_entries = []
        self.random_shown = []

    def ask_continue(self):
        self.continue_asked += 1
        return self.continue_answers.pop(0) if self.continue_answers else True

    def pause(self, message=None):
        self.pauses += 1

    def select_scripts(self, label, entries, previous=None):
        self.previous_seen.append(list(previous or []))
        return self.selections.pop(0) if self.selections else None

    def confirm_execution(self, entries):
        self.confirmed_entries.append(list(entries))
        return self.confirmations.pop(0) if self.confirmations else ConfirmationResult.BACK_TO_CATEGORY

    def confirm_random(self, entry):
        self.random_shown.append(entry)
        return self.random_confirmations.pop(0) if self.random_confirmations else ConfirmationResult.BACK_TO_CATEGORY
