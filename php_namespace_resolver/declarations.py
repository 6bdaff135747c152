import re
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional

from .errors import AlreadyImported

CLASS_PATTERN = re.compile(r'(class|trait|interface)\s+\w+')

UseStatement = namedtuple('UseStatement', ['text', 'line'])


@dataclass
class DeclarationSites:
    """First lines (1-based) of the markers that bound a file's preamble.

    ``php_tag_line`` is 0 when the file has no open tag; the other sites
    are None when absent. ``use_block_line`` points at the last use line.
    """
    php_tag_line: int = 0
    namespace_line: Optional[int] = None
    use_block_line: Optional[int] = None
    class_line: Optional[int] = None

    @property
    def complete(self):
        return bool(self.php_tag_line and self.namespace_line and
                    self.use_block_line and self.class_line)


@dataclass(frozen=True)
class Insertion:
    """Where a new use statement goes and the blank lines around it"""
    prepend: str
    append: str
    line: int

    def text(self, fqcn, alias=None):
        return self.around(use_statement(fqcn, alias))

    def around(self, statement):
        return "%s%s%s" % (self.prepend, statement, self.append)


def use_statement(fqcn, alias=None):
    if alias is not None:
        return "use %s as %s;" % (fqcn, alias)
    return "use %s;" % fqcn


def scan_declarations(lines, fqcn=None):
    """Walk the file top-down collecting use statements and preamble sites.

    Raises AlreadyImported as soon as ``use <fqcn>;`` is met.
    """
    use_statements = []
    sites = DeclarationSites()
    duplicate = "use %s;" % fqcn if fqcn is not None else None

    for line, text in enumerate(lines):
        if duplicate is not None and text == duplicate:
            raise AlreadyImported()

        if sites.complete:
            break

        if text.startswith('<?php'):
            if not sites.php_tag_line:
                sites.php_tag_line = line + 1
        elif text.startswith('namespace ') or text.startswith('<?php namespace'):
            if sites.namespace_line is None:
                sites.namespace_line = line + 1
        elif text.startswith('use '):
            use_statements.append(UseStatement(text, line))
            sites.use_block_line = line + 1
        elif CLASS_PATTERN.search(text):
            if sites.class_line is None:
                sites.class_line = line + 1

    return use_statements, sites


def use_statements(lines):
    return scan_declarations(lines)[0]


def insertion_point(sites):
    """Compute the insertion line and the spacing for a new use statement"""
    prepend = '\n' if sites.php_tag_line else ''
    append = '\n'
    line = sites.php_tag_line

    if not prepend and sites.namespace_line is not None:
        prepend = '\n'

    if sites.use_block_line is not None:
        prepend = ''
        line = sites.use_block_line
    elif sites.namespace_line is not None:
        line = sites.namespace_line

    if sites.class_line is not None:
        # a missing open tag stays at 0, so a type on the first line counts as adjacent
        neighbours = (sites.use_block_line, sites.namespace_line, sites.php_tag_line)
        if any(site is not None and sites.class_line - site <= 1 for site in neighbours):
            append = '\n\n'

    return Insertion(prepend, append, line)
