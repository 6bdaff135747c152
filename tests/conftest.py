import pytest

from php_namespace_resolver.host import Host
from php_namespace_resolver.settings import Settings


class FakeHost(Host):
    """In-memory host: one document, canned answers for pickers and prompts"""

    def __init__(self, text, cursor=(0, 0), files=None, settings=None):
        self.text = text
        self.caret = cursor
        self.files = files or {}
        self.settings = Settings(settings or {})
        self.picks = []
        self.prompts = []
        self.picked_from = []
        self.prompted = 0
        self.messages = []
        self.status_messages = []
        self.edit_batches = []
        self.saves = 0

    def find_files(self, exclude):
        return list(self.files)

    def open_buffer(self, path):
        return self.files[path].split('\n')

    def active_lines(self):
        return self.text.split('\n')

    def cursor(self):
        return self.caret

    def offset(self, position):
        lines = self.active_lines()
        line, column = position
        if line >= len(lines):
            return len(self.text)
        start = sum(len(text) + 1 for text in lines[:line])
        return start + min(column, len(lines[line]))

    def apply_edits(self, edits):
        self.edit_batches.append(list(edits))
        for edit in sorted(edits, key=lambda edit: edit.start, reverse=True):
            start, end = self.offset(edit.start), self.offset(edit.end)
            self.text = self.text[:start] + edit.text + self.text[end:]

    def save(self):
        self.saves += 1

    def pick_one(self, options):
        self.picked_from.append(list(options))
        return self.picks.pop(0) if self.picks else None

    def prompt_text(self, placeholder):
        self.prompted += 1
        return self.prompts.pop(0) if self.prompts else None

    def notify(self, message, error=False):
        self.messages.append((message, error))

    def notify_status_bar(self, message, duration_ms=3000):
        self.status_messages.append(message)


@pytest.fixture
def make_host():
    def make(text, cursor=(0, 0), files=None, **settings):
        settings.setdefault("auto_sort", False)
        return FakeHost(text, cursor=cursor, files=files, settings=settings)

    return make
