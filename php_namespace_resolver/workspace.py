import os
from fnmatch import fnmatch

PHP_EXTENSION = '.php'


def is_excluded(relative_path, exclude):
    """Match a project-relative path against ``**``-style globs"""
    candidate = '/' + relative_path.replace(os.sep, '/')
    return any(fnmatch(candidate, pattern) or fnmatch(candidate[1:], pattern)
               for pattern in exclude)


def find_php_files(folders, exclude=()):
    """Every ``*.php`` file below ``folders`` not matched by ``exclude``.

    Paths come back sorted so callers see them in a stable order.
    """
    found = []

    for folder in folders:
        for root, dirs, files in os.walk(folder):
            relative_root = os.path.relpath(root, folder)
            if relative_root == '.':
                relative_root = ''

            dirs[:] = [
                name for name in dirs
                if not is_excluded(os.path.join(relative_root, name) + '/', exclude)
            ]

            for file in files:
                if not file.endswith(PHP_EXTENSION):
                    continue

                relative_path = os.path.join(relative_root, file)
                if not is_excluded(relative_path, exclude):
                    found.append(os.path.join(root, file))

    return sorted(found)


def read_lines(path):
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read().splitlines()
