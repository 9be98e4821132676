import os


class PathUtils:
    @staticmethod
    def to_relative(path: str, root: str) -> str:
        """
        Path of ``path`` relative to ``root``, using the platform separator.
        Falls back to ``path`` unchanged when no relative form exists
        (e.g. a different drive on Windows).
        """
        try:
            return os.path.relpath(path, root)
        except ValueError:
            return path

    @staticmethod
    def extension(path: str) -> str:
        """
        Suffix of the file name starting at its last dot, or ''.
        Dotfiles count: ``.bashrc`` has the extension ``.bashrc``.
        """
        name = os.path.basename(path)
        dot = name.rfind(".")
        return name[dot:] if dot >= 0 else ""

    @staticmethod
    def language_id(path: str) -> str:
        """Fence label for a code block: the extension without its dot."""
        ext = PathUtils.extension(path)
        return ext[1:] if ext.startswith(".") else ext

    @staticmethod
    def same_file(path: str, other: str) -> bool:
        """True when both names resolve to the same location, existing or not."""
        return os.path.realpath(path) == os.path.realpath(other)
