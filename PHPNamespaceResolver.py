import sublime
import sublime_plugin
import threading

from .php_namespace_resolver.host import Host, STATUS_BAR_DURATION
from .php_namespace_resolver.resolver import Resolver
from .php_namespace_resolver.settings import SETTINGS_FILE, Settings


class SublimeHost(Host):
    """Host backed by a Sublime Text view.

    Runs on a worker thread; every UI call is handed to the main thread
    with set_timeout and the worker waits for the answer.
    """

    def __init__(self, view):
        self.view = view
        self.window = view.window() or sublime.active_window()
        self.settings = Settings(sublime.load_settings(SETTINGS_FILE))

    def on_main_thread(self, callback):
        """Run ``callback(done)`` on the UI thread and wait for ``done(result)``"""
        finished = threading.Event()
        result = []

        def done(value=None):
            result.append(value)
            finished.set()

        sublime.set_timeout(lambda: callback(done), 0)
        finished.wait()
        return result[0]

    def project_folders(self):
        return self.window.folders() if self.window else []

    def active_lines(self):
        return self.on_main_thread(
            lambda done: done(self.view.substr(sublime.Region(0, self.view.size())).split('\n')))

    def cursor(self):
        def caret(done):
            selection = self.view.sel()
            done(self.view.rowcol(selection[0].b) if len(selection) else (0, 0))

        return self.on_main_thread(caret)

    def apply_edits(self, edits):
        payload = [[edit.start[0], edit.start[1], edit.end[0], edit.end[1], edit.text]
                   for edit in edits]

        def apply(done):
            self.view.run_command('php_namespace_replace', {'edits': payload})
            done()

        self.on_main_thread(apply)

    def save(self):
        def save(done):
            if self.view.file_name():
                self.view.run_command('save')
            done()

        self.on_main_thread(save)

    def pick_one(self, options):
        def pick(done):
            self.window.show_quick_panel(
                options, lambda index: done(options[index] if index >= 0 else None))

        return self.on_main_thread(pick)

    def prompt_text(self, placeholder):
        def prompt(done):
            self.window.show_input_panel(
                placeholder + ':', '', lambda text: done(text), None, lambda: done(None))

        return self.on_main_thread(prompt)

    def notify(self, message, error=False):
        if error:
            sublime.set_timeout(lambda: sublime.error_message(message), 0)
        else:
            sublime.set_timeout(lambda: sublime.message_dialog(message), 0)

    def notify_status_bar(self, message, duration_ms=STATUS_BAR_DURATION):
        # sublime clears status messages on its own schedule
        sublime.set_timeout(lambda: sublime.status_message(message), 0)


class ResolverCommand(sublime_plugin.TextCommand):
    action = None

    def run(self, edit):
        resolver = Resolver(SublimeHost(self.view))
        threading.Thread(target=resolver.run, args=(self.action,)).start()

    def is_enabled(self):
        return self.view.match_selector(0, "embedding.php, source.php, text.html.basic")


class PhpNamespaceImportCommand(ResolverCommand):
    """Import the class under the cursor"""
    action = 'import_command'


class PhpNamespaceExpandCommand(ResolverCommand):
    """Replace the class under the cursor with its FQCN"""
    action = 'expand_command'


class PhpNamespaceSortCommand(ResolverCommand):
    """Sort the use statements of the file"""
    action = 'sort_command'


class PhpNamespaceReplaceCommand(sublime_plugin.TextCommand):
    """Apply ``[line, col, end_line, end_col, text]`` edits in one undo step"""

    def run(self, edit, edits):
        # back to front so earlier positions stay valid
        for line, col, end_line, end_col, text in sorted(edits, reverse=True):
            region = sublime.Region(self.point(line, col), self.point(end_line, end_col))
            self.view.replace(edit, region, text)

    def point(self, line, col):
        last_line, _ = self.view.rowcol(self.view.size())
        if line > last_line:
            return self.view.size()
        return min(self.view.text_point(line, col), self.view.line(self.view.text_point(line, 0)).end())


def plugin_loaded():
    """Initialization callback"""
    print("PHP Namespace Resolver ready")
