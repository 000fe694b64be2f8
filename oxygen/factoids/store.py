from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator, Mapping
from pathlib import Path

from ..errors.internal import StoreError
from ..logs.logger import logger


class FactoidStore:
    """Name -> response text mapping persisted as ``name text`` lines.

    The whole mapping is rewritten after every ``define``; the write goes to a
    temporary file that replaces the target, so readers never see a partial
    file.
    """

    def __init__(
        self, path: str | os.PathLike[str], factoids: Mapping[str, str] | None = None
    ) -> None:
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = str(path)
        self._factoids: dict[str, str] = dict(factoids or {})

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> FactoidStore:
        """Load the store at ``path``.

        A missing file yields an empty store. An unreadable one is logged and
        also yields an empty store.
        """
        try:
            with open(path, encoding="utf-8") as f:
                contents = f.read()
        except FileNotFoundError:
            logger.log_event("factoids", "file_missing", path=str(path))
            return cls(path)
        except (OSError, ValueError) as e:
            logger.log_event(
                "factoids",
                "load_error",
                level=logging.ERROR,
                path=str(path),
                error=str(e),
                error_type=type(e).__name__,
            )
            return cls(path)
        store = cls(path, parse_factoids(contents))
        logger.log_event("factoids", "loaded", path=str(path), count=len(store))
        return store

    def get(self, name: str) -> str | None:
        return self._factoids.get(name)

    def names(self) -> list[str]:
        return list(self._factoids)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._factoids.items())

    def __contains__(self, name: object) -> bool:
        return name in self._factoids

    def __len__(self) -> int:
        return len(self._factoids)

    def define(self, name: str, text: str) -> None:
        """Insert or overwrite ``name`` and persist the whole store.

        Raises:
            ValueError: If the name holds whitespace or the text a newline.
            StoreError: If the store could not be written.
        """
        if not name or any(c.isspace() for c in name):
            raise ValueError(f"invalid factoid name {name!r}")
        if "\n" in text or "\r" in text:
            raise ValueError("factoid text must be a single line")
        self._factoids[name] = text
        self.save()
        logger.log_event("factoids", "defined", name=name, count=len(self))

    def save(self) -> None:
        """Rewrite the backing file from the in-memory mapping.

        Raises:
            StoreError: If writing or replacing the file failed.
        """
        target = Path(self.path)
        temp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp:
                temp_path = tmp.name
                tmp.write(serialize_factoids(self._factoids))
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(temp_path, target)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
            raise StoreError(
                f"could not save factoids to {self.path}: {e}",
                data={"path": self.path},
            ) from e


def parse_factoids(contents: str) -> dict[str, str]:
    """Parse ``name text`` records; lines without a space are skipped."""
    factoids: dict[str, str] = {}
    for line in contents.split("\n"):
        name, sep, response = line.partition(" ")
        if not sep or not name:
            continue
        factoids[name] = response.strip()
    return factoids


def serialize_factoids(factoids: Mapping[str, str]) -> str:
    return "\n".join(f"{name} {text}" for name, text in factoids.items())
