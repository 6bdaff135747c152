import os
import re

NAMESPACE_PATTERN = re.compile(r'^(?:<\?php\s+)?namespace\s+([^;]+);')


def base_name(path):
    """File name up to its first dot: ``src/Models/User.php`` -> ``User``"""
    return os.path.basename(path).split('.')[0]


def is_namespace_line(text):
    return text.startswith('namespace ') or text.startswith('<?php namespace ')


def parse_namespace(lines):
    """Return the first namespace declared in ``lines``, or None"""
    for text in lines:
        if not is_namespace_line(text):
            continue

        match = NAMESPACE_PATTERN.match(text)
        if match:
            return match.group(1).strip()
    return None


def find_namespaces(resolving, files, open_buffer):
    """Collect the FQCNs under which ``resolving`` is declared.

    Only files named after the class are opened, and only the first
    namespace of each file counts. When nothing is found the bare name is
    returned so the class can be imported from the global namespace.
    """
    namespaces = []

    for path in files:
        if base_name(path) != resolving:
            continue

        namespace = parse_namespace(open_buffer(path))
        if namespace is None:
            continue

        fqcn = "%s\\%s" % (namespace, resolving)
        if fqcn not in namespaces:
            namespaces.append(fqcn)

    if not namespaces:
        namespaces.append(resolving)

    return namespaces
