"""
Finder
Locates files by logical name across the registered search paths
"""
from pathlib import Path
from typing import List, Optional, Union


class Finder:
    """
    File locator used to resolve representation names to files

    Every registered search path is tried in order. The application base
    path (Storage.base()) is searched when no path has been registered.

    Example:
        path = Finder.search('views/representations', 'users/show', '.py')
        paths = Finder.search('views/representations', 'user', '.py', multiple=True)
    """

    _paths: List[Path] = []

    @classmethod
    def add_path(cls, path: Union[str, Path], prepend: bool = False):
        """
        Register a search path

        Args:
            path: Directory to search
            prepend: Search this path before the already registered ones
        """
        path = Path(path).resolve()
        if path in cls._paths:
            return

        if prepend:
            cls._paths.insert(0, path)
        else:
            cls._paths.append(path)

    @classmethod
    def remove_path(cls, path: Union[str, Path]):
        """Unregister a search path"""
        path = Path(path).resolve()
        if path in cls._paths:
            cls._paths.remove(path)

    @classmethod
    def clear_paths(cls):
        """Unregister all search paths"""
        cls._paths = []

    @classmethod
    def paths(cls) -> List[Path]:
        """Get the search paths in lookup order"""
        if cls._paths:
            return list(cls._paths)

        from representations.support.storage import Storage
        return [Storage.base()]

    @classmethod
    def search(
        cls,
        directory: Union[str, Path],
        name: str,
        extension: str = '.py',
        recursive: bool = False,
        multiple: bool = False
    ) -> Union[Path, List[Path], None]:
        """
        Search for a file in a directory of every search path

        Args:
            directory: Directory relative to the search paths (absolute paths are used as-is)
            name: Logical file name without extension, may contain sub folders
            extension: File extension including the dot
            recursive: Also match the name in sub folders of the directory
            multiple: Return every match instead of the first one

        Returns:
            Path of the first match, list of matches when multiple is set,
            or None when nothing matches
        """
        file_name = f"{name}{extension}"
        found: List[Path] = []

        for root in cls._roots(directory):
            candidates = [root / file_name]
            if recursive and root.is_dir():
                candidates.extend(sorted(root.rglob(file_name)))

            for candidate in candidates:
                if not candidate.is_file() or not cls._is_within(candidate, root):
                    continue

                candidate = candidate.resolve()
                if candidate in found:
                    continue

                if not multiple:
                    return candidate
                found.append(candidate)

        return found if multiple else None

    @classmethod
    def _roots(cls, directory: Union[str, Path]) -> List[Path]:
        """Directories to search, one per search path"""
        directory = Path(directory)
        if directory.is_absolute():
            return [directory]
        return [path / directory for path in cls.paths()]

    @staticmethod
    def _is_within(path: Path, root: Path) -> bool:
        """Reject names that climb out of the searched directory"""
        try:
            path.resolve().relative_to(root.resolve())
            return True
        except ValueError:
            return False
