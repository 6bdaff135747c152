import re
from collections import namedtuple

from .errors import NothingToSort

WORD_PATTERN = re.compile(r'\w+')
QUALIFIED_WORD_PATTERN = re.compile(r'[\w\\]+')
IMPORTED_NAME_PATTERN = re.compile(r'(\w+)?;')

# start and end are (line, column) pairs; start == end inserts
TextEdit = namedtuple('TextEdit', ['start', 'end', 'text'])


def insert_at(line, text):
    return TextEdit((line, 0), (line, 0), text)


def short_name(fqcn):
    """Last identifier of a qualified name: ``App\\Models\\User`` -> ``User``"""
    words = WORD_PATTERN.findall(fqcn)
    return words[-1] if words else fqcn


def imported_name(statement):
    """Name a use statement binds: the alias if any, else the short name"""
    match = IMPORTED_NAME_PATTERN.search(statement)
    return match.group(1) if match else None


def has_conflict(use_statements, name):
    return any(imported_name(statement.text) == name for statement in use_statements)


def is_qualified(token):
    return '\\' in token


def qualified_word_at(text, column):
    """Find the PHP name touching ``column`` in a line of text.

    Returns ``(start, end, word)`` or None. Backslashes are part of the
    word so partially and fully qualified names are picked up whole.
    """
    for match in QUALIFIED_WORD_PATTERN.finditer(text):
        if match.start() <= column <= match.end():
            if not WORD_PATTERN.search(match.group()):
                return None
            return match.start(), match.end(), match.group()
    return None


def sort_use_statements(use_statements, alphabetically=True):
    if len(use_statements) < 2:
        raise NothingToSort()

    if alphabetically:
        key = lambda statement: statement.text.lower()
    else:
        key = lambda statement: len(statement.text)

    return sorted(use_statements, key=key)


def sort_edits(use_statements, alphabetically=True):
    """Rewrite the existing use lines in place with their sorted text"""
    ordered = sort_use_statements(use_statements, alphabetically)

    return [
        TextEdit((original.line, 0), (original.line, len(original.text)), replacement.text)
        for original, replacement in zip(use_statements, ordered)
    ]


def expansion(fqcn, leading_separator=False):
    return ('\\' if leading_separator else '') + fqcn
