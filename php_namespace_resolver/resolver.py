import traceback

from .declarations import (
    UseStatement,
    insertion_point,
    scan_declarations,
    use_statement,
    use_statements,
)
from .errors import NoSelection, ResolverError
from .imports import (
    expansion,
    has_conflict,
    insert_at,
    is_qualified,
    qualified_word_at,
    short_name,
    sort_edits,
    sort_use_statements,
    TextEdit,
)
from .scanner import find_namespaces


class Resolver:
    """Runs the import, expand and sort commands against a Host"""

    def __init__(self, host):
        self.host = host

    @property
    def settings(self):
        return self.host.settings

    def run(self, command):
        """Entry point for the worker thread; reports failures the commands don't handle"""
        try:
            getattr(self, command)()
        except Exception as e:
            print("PHP Namespace Resolver: %s failed" % command)
            traceback.print_exc()
            self.host.show_message("Unexpected error: %s" % e, error=True)

    def import_command(self):
        try:
            word = self.resolving()
            resolving = word[2]

            if is_qualified(resolving):
                self.import_class(resolving.lstrip('\\'), word)
                return

            fqcn = self.pick_class(self.find_namespaces(resolving))
            if fqcn is None:
                return

            self.import_class(fqcn)
        except ResolverError as e:
            self.host.show_message(str(e), error=True)

    def expand_command(self):
        try:
            word = self.resolving()
            fqcn = self.pick_class(self.find_namespaces(word[2]))
            if fqcn is None:
                return

            self.expand_class(word, fqcn, prepend_backslash=True)
        except ResolverError as e:
            self.host.show_message(str(e), error=True)

    def sort_command(self):
        try:
            self.sort_imports()
        except ResolverError as e:
            self.host.show_message(str(e), error=True)
            return

        self.host.show_message("Imports sorted.")

    def resolving(self):
        """The word under the cursor as ``(start, end, text)``"""
        line, column = self.host.cursor()
        lines = self.host.active_lines()
        text = lines[line] if line < len(lines) else ''

        word = qualified_word_at(text, column)
        if word is None:
            raise NoSelection()

        return (line, word[0]), (line, word[1]), word[2]

    def find_namespaces(self, resolving):
        files = self.host.find_files(self.settings.exclude)
        self.host.log("searched %d files for %s" % (len(files), resolving))

        namespaces = find_namespaces(resolving, files, self.host.open_buffer)
        self.host.log("candidates: %s" % ", ".join(namespaces))
        return namespaces

    def pick_class(self, namespaces):
        if len(namespaces) == 1:
            return namespaces[0]

        return self.host.pick_one(namespaces)

    def import_class(self, fqcn, word=None):
        """Import ``fqcn``; when ``word`` is given it is shortened to the imported name.

        Everything is validated and negotiated first, then the command's
        edits go to the host as a single batch.
        """
        statements, sites = scan_declarations(self.host.active_lines(), fqcn)

        alias = None
        if has_conflict(statements, short_name(fqcn)):
            alias = self.ask_alias(statements)
            if alias is None:
                return

        edits = []
        if word is not None:
            edits.append(TextEdit(word[0], word[1], alias or short_name(fqcn)))
        edits.extend(self.insertion_edits(statements, sites, use_statement(fqcn, alias)))

        self.host.apply_edits(edits)
        if self.settings.auto_sort:
            self.host.save()

        self.host.show_message("Class imported.")

    def ask_alias(self, statements):
        """Prompt until the user gives a free alias or gives up"""
        while True:
            alias = self.host.prompt_text("Enter an alias")
            if not alias:
                return None

            if not has_conflict(statements, alias):
                return alias

            self.host.notify_status_bar("This alias is already in use.")

    def insertion_edits(self, statements, sites, statement):
        insertion = insertion_point(sites)

        if not (self.settings.auto_sort and statements):
            return [insert_at(insertion.line, insertion.around(statement))]

        # the new statement lands right after the last use line, so sorting
        # after the insert is the same as rewriting the old lines plus that slot
        ordered = [s.text for s in sort_use_statements(
            statements + [UseStatement(statement, insertion.line)],
            self.settings.sort_alphabetically)]

        edits = [
            TextEdit((original.line, 0), (original.line, len(original.text)), text)
            for original, text in zip(statements, ordered)
        ]
        edits.append(insert_at(insertion.line, insertion.around(ordered[-1])))
        return edits

    def expand_class(self, word, fqcn, prepend_backslash=False):
        start, end = word[0], word[1]
        leading = prepend_backslash and self.settings.leading_separator
        self.host.apply_edits([TextEdit(start, end, expansion(fqcn, leading))])

    def sort_imports(self):
        edits = sort_edits(use_statements(self.host.active_lines()),
                           self.settings.sort_alphabetically)
        self.host.apply_edits(edits)
