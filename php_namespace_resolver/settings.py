SETTINGS_FILE = "PHP Namespace Resolver.sublime-settings"

DEFAULTS = {
    "auto_sort": True,
    "leading_separator": True,
    "sort_alphabetically": True,
    "show_message_on_status_bar": False,
    "exclude": ["**/node_modules/**", "**/vendor/**/tests/**"],
    "debug": False,
}


class Settings:
    """Read access to the package settings with defaults applied.

    ``source`` is anything with a ``get(key, default)`` method: the object
    returned by ``sublime.load_settings`` or a plain dict.
    """

    def __init__(self, source=None):
        self.source = source if source is not None else {}

    def get(self, key):
        return self.source.get(key, DEFAULTS.get(key))

    @property
    def auto_sort(self):
        return bool(self.get("auto_sort"))

    @property
    def leading_separator(self):
        return bool(self.get("leading_separator"))

    @property
    def sort_alphabetically(self):
        return bool(self.get("sort_alphabetically"))

    @property
    def show_message_on_status_bar(self):
        return bool(self.get("show_message_on_status_bar"))

    @property
    def debug(self):
        return bool(self.get("debug"))

    @property
    def exclude(self):
        patterns = self.get("exclude") or []
        if isinstance(patterns, str):
            return [patterns]
        return list(patterns)
