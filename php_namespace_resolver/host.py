from .settings import Settings
from .workspace import find_php_files, read_lines

STATUS_BAR_DURATION = 3000


class Host:
    """Editor services the resolver needs.

    The resolver calls these from a worker thread and expects each call to
    return once the editor has answered, so implementations that talk to a
    UI must block until the user is done.
    """

    settings = Settings()

    def project_folders(self):
        raise NotImplementedError

    def find_files(self, exclude):
        return find_php_files(self.project_folders(), exclude)

    def open_buffer(self, path):
        try:
            return read_lines(path)
        except OSError as e:
            print("PHP Namespace Resolver: could not read %s: %s" % (path, e))
            return []

    def active_lines(self):
        """Lines of the document the command runs on"""
        raise NotImplementedError

    def cursor(self):
        """``(line, column)`` of the caret"""
        raise NotImplementedError

    def apply_edits(self, edits):
        """Apply a list of TextEdit to the active document in one step"""
        raise NotImplementedError

    def save(self):
        raise NotImplementedError

    def pick_one(self, options):
        """Let the user choose one of ``options``; None when cancelled"""
        raise NotImplementedError

    def prompt_text(self, placeholder):
        """Ask the user for a line of text; None when cancelled"""
        raise NotImplementedError

    def notify(self, message, error=False):
        raise NotImplementedError

    def notify_status_bar(self, message, duration_ms=STATUS_BAR_DURATION):
        raise NotImplementedError

    def log(self, message):
        if self.settings.debug:
            print("PHP Namespace Resolver: %s" % message)

    def show_message(self, message, error=False):
        if self.settings.show_message_on_status_bar:
            self.notify_status_bar(message)
        else:
            self.notify(message, error)
