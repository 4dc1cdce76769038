#!/usr/bin/env python3
"""Directory ↔ ZIP archive synchronization with overwrite policies.

:license: MIT

Compresses a directory tree into a ZIP archive and extracts archives back
onto disk.  Repeated runs are reconciled entry by entry: an existing
archive can be updated in place, replaced, refused or left alone, and each
entry is added, replaced or skipped according to an overwrite policy that
compares last-write times.

Policies
--------
Existing archive (``compress`` only, decided once per call)::

    update   reuse the archive, reconcile entries per overwrite policy
    replace  delete the archive and build a fresh one (default)
    error    raise ConflictError, leave the archive untouched
    ignore   do nothing and return

Overwrite (per entry, ``compress --action update`` and ``extract``)::

    always    replace whatever is there
    if-newer  replace only when the source is newer (default)
    never     only add what is missing

Timestamps are compared at ZIP resolution: local time, two-second
granularity, years 1980–2107.

Examples
--------
Create, then refresh an archive::

    $ zipsync compress -i docs/ -o docs.zip -v
    $ zipsync compress -i docs/ -o docs.zip --action update -v

Extract without touching files that already exist::

    $ zipsync extract -i docs.zip -o restored/ --overwrite never
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import tempfile
import zipfile
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal

# ── Policies ─────────────────────────────────────────────────────────────────


class ExistingArchiveAction(Enum):
    """What ``compress`` does when the destination archive already exists."""

    UPDATE = "update"
    REPLACE = "replace"
    ERROR = "error"
    IGNORE = "ignore"


class OverwritePolicy(Enum):
    """Per-entry policy applied when the target of an entry already exists."""

    ALWAYS = "always"
    IF_NEWER = "if-newer"
    NEVER = "never"


class CompressionLevel(Enum):
    """Compression hint handed to the codec."""

    OPTIMAL = "optimal"
    FASTEST = "fastest"
    NO_COMPRESSION = "none"
    SMALLEST_SIZE = "smallest"


EntryAction = Literal["add", "replace", "skip"]

# ── Constants ────────────────────────────────────────────────────────────────

DEFAULT_ARCHIVE_ACTION = ExistingArchiveAction.REPLACE
DEFAULT_OVERWRITE_POLICY = OverwritePolicy.IF_NEWER
DEFAULT_COMPRESSION = CompressionLevel.OPTIMAL

COPY_BUFFER_SIZE = 2**20  # 1 MiB

DIR_MARKER = "/"

# DOS date/time range representable in a ZIP local header.
_ZIP_MIN_TIME = datetime(1980, 1, 1, 0, 0, 0)
_ZIP_MAX_TIME = datetime(2107, 12, 31, 23, 59, 58)

# zipfile takes the algorithm and its level as separate keywords.
_LEVEL_KWARGS: dict[CompressionLevel, dict[str, int]] = {
    CompressionLevel.OPTIMAL: {"compress_type": zipfile.ZIP_DEFLATED},
    CompressionLevel.FASTEST: {"compress_type": zipfile.ZIP_DEFLATED, "compresslevel": 1},
    CompressionLevel.NO_COMPRESSION: {"compress_type": zipfile.ZIP_STORED},
    CompressionLevel.SMALLEST_SIZE: {"compress_type": zipfile.ZIP_DEFLATED, "compresslevel": 9},
}


def _compression_kwargs(level: CompressionLevel) -> dict[str, int]:
    """Return keyword arguments for ``ZipFile.write`` for *level*."""
    return dict(_LEVEL_KWARGS[level])


# ── Errors ───────────────────────────────────────────────────────────────────


class ZipSyncError(Exception):
    """Base class for all zip_sync failures.

    *cause* is the error this one wraps, if any.  It takes precedence over
    Python's implicit chaining when the chain is flattened.  Errors built
    with :meth:`wrapping` already carry the flattened chain in their message,
    so flattening stops at them.
    """

    cause_in_message = False

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    @classmethod
    def wrapping(cls, prefix: str, cause: BaseException) -> ZipSyncError:
        """Return an error whose message is *prefix* plus the flattened *cause*."""
        error = cls(prefix + flatten_error(cause).rstrip("\n"), cause=cause)
        error.cause_in_message = True
        return error


class ConflictError(ZipSyncError):
    """The destination archive exists and the action is ``error``."""


class CompressionError(ZipSyncError):
    """Creating or updating an archive failed."""


class ExtractionError(ZipSyncError):
    """Extracting an archive failed."""


def _next_cause(error: BaseException) -> BaseException | None:
    if getattr(error, "cause_in_message", False):
        return None
    explicit = getattr(error, "cause", None)
    if isinstance(explicit, BaseException):
        return explicit
    if error.__cause__ is not None:
        return error.__cause__
    if error.__context__ is not None and not error.__suppress_context__:
        return error.__context__
    return None


def flatten_error(error: BaseException | None) -> str:
    """Return the messages of *error* and every nested cause, one per line.

    Each message is terminated by a newline.  An error without a message
    contributes its class name.  Returns ``""`` for ``None``.
    """
    lines: list[str] = []
    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        lines.append(str(error) or type(error).__name__)
        error = _next_cause(error)
    return "".join(f"{line}\n" for line in lines)


# ── Path translation ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FileSystemObject:
    """A file or directory discovered under the source tree."""

    path: str
    is_dir: bool = False

    @property
    def marked_path(self) -> str:
        """*path* with a trailing separator when this is a directory."""
        if self.is_dir and not self.path.endswith(os.sep):
            return self.path + os.sep
        return self.path


def translate_path(absolute_path: str, tree_root_parent: str) -> str:
    """Map *absolute_path* to its archive-relative name.

    *tree_root_parent* is stripped from the front, separators become ``/``
    and one leading separator is dropped.  A trailing separator (directory
    marker) is kept.  *absolute_path* must start with *tree_root_parent*.
    """
    relative = absolute_path[len(tree_root_parent):]
    relative = relative.replace(os.sep, "/")
    if os.altsep:
        relative = relative.replace(os.altsep, "/")
    if relative.startswith("/"):
        relative = relative[1:]
    return relative


def _collect_objects(source_root: str, exclude: str | None = None) -> list[FileSystemObject]:
    """Walk *source_root* and return every directory and file beneath it.

    Each level lists its directories before its files, both sorted.
    *exclude* is an absolute file path to leave out (the archive being
    written, when it sits inside the tree).
    """
    objects: list[FileSystemObject] = []
    for root, dirs, files in os.walk(source_root):
        dirs.sort()
        for d in dirs:
            objects.append(FileSystemObject(os.path.join(root, d), is_dir=True))
        for fname in sorted(files):
            fp = os.path.join(root, fname)
            if exclude is not None and os.path.abspath(fp) == exclude:
                continue
            objects.append(FileSystemObject(fp))
    return objects


# ── Timestamps ───────────────────────────────────────────────────────────────


def _archive_time(timestamp: float) -> datetime:
    """Return *timestamp* as the local time a ZIP entry would record.

    Seconds are floored to an even value and the result is clamped to the
    DOS date range, so a file and the entry written from it compare equal.
    """
    dt = datetime.fromtimestamp(timestamp).replace(microsecond=0)
    dt = dt.replace(second=dt.second - dt.second % 2)
    return min(max(dt, _ZIP_MIN_TIME), _ZIP_MAX_TIME)


def _file_time(path: str) -> datetime:
    """Last-write time of *path* at archive resolution."""
    return _archive_time(os.stat(path).st_mtime)


def _entry_time(info: zipfile.ZipInfo) -> datetime:
    """Stored time of *info*; a zero DOS date reads as the DOS epoch day."""
    year, month, day, hour, minute, second = info.date_time
    return datetime(year, month or 1, day or 1, hour, minute, second)


# ── Decision tables ──────────────────────────────────────────────────────────


def decide_update(
    policy: OverwritePolicy,
    entry_time: datetime | None,
    source_time: datetime,
) -> EntryAction:
    """Decide what an update-mode compress does with one filesystem object.

    *entry_time* is ``None`` when the archive has no entry of that name.
    """
    if entry_time is None:
        return "add"
    if policy is OverwritePolicy.ALWAYS:
        return "replace"
    if policy is OverwritePolicy.IF_NEWER:
        return "replace" if source_time > entry_time else "skip"
    return "skip"


def decide_extract(
    policy: OverwritePolicy,
    entry_time: datetime,
    dest_time: datetime | None,
) -> EntryAction:
    """Decide what extraction does with one file entry.

    *dest_time* is ``None`` when the destination file does not exist.
    """
    if dest_time is None:
        return "add"
    if policy is OverwritePolicy.ALWAYS:
        return "replace"
    if policy is OverwritePolicy.IF_NEWER:
        return "replace" if entry_time > dest_time else "skip"
    return "skip"


# ── Logging ──────────────────────────────────────────────────────────────────


def _format_size(size_bytes: int | float) -> str:
    """Format *size_bytes* with an appropriate binary unit (B … PiB)."""
    for unit in ("B", "KiB", "MiB", "GiB", "TiB"):
        if abs(size_bytes) < 1024:
            return f"{size_bytes:.1f} {unit}" if unit != "B" else f"{int(size_bytes)} B"
        size_bytes /= 1024
    return f"{size_bytes:.1f} PiB"


def _log(msg: str) -> None:
    """Print a status line to stderr."""
    print(msg, file=sys.stderr)


def _summary(counts: dict[str, int]) -> str:
    return ", ".join(f"{counts[k]} {k}" for k in ("add", "replace", "skip"))


# ── Archive session ──────────────────────────────────────────────────────────


@dataclass
class ArchiveEntry:
    """An entry of the archive held open by an :class:`ArchiveSession`.

    *info* is set for entries read from an existing archive.  *source* is
    set for entries added during an update session, which are written on
    close.  Entries written in create mode carry neither.
    """

    name: str
    modified: datetime
    info: zipfile.ZipInfo | None = None
    source: str | None = None


class ArchiveSession:
    """Context manager owning the destination archive for one compress call.

    In ``"create"`` mode entries are written straight into a new archive.
    In ``"update"`` mode the existing entry table is read once; ``delete``
    and ``add`` mutate the session and the archive file is only changed on
    a clean close:

    * nothing changed: the file is left untouched;
    * entries added only: they are appended in place;
    * any entry deleted: surviving and added entries are streamed into a
      temporary sibling which then replaces the archive.
    """

    def __init__(
        self,
        archive_path: str,
        mode: Literal["create", "update"],
        compression: CompressionLevel = DEFAULT_COMPRESSION,
    ) -> None:
        self._path = archive_path
        self._mode = mode
        self._kwargs = _compression_kwargs(compression)
        self._entries: dict[str, ArchiveEntry] = {}
        self._deleted = False
        self._zip: zipfile.ZipFile | None = None
        if mode == "create":
            self._zip = zipfile.ZipFile(archive_path, "w", strict_timestamps=False)
        else:
            self._zip = zipfile.ZipFile(archive_path, "r")
            try:
                for info in self._zip.infolist():
                    # Later duplicates shadow earlier ones, as on extraction.
                    self._entries[info.filename] = ArchiveEntry(
                        info.filename, _entry_time(info), info=info
                    )
            except Exception:
                self._zip.close()
                raise

    @property
    def mode(self) -> str:
        return self._mode

    def find(self, name: str) -> ArchiveEntry | None:
        """Return the entry named *name*, or ``None``."""
        return self._entries.get(name)

    def delete(self, entry: ArchiveEntry) -> None:
        """Remove *entry* from the archive (update mode only)."""
        if self._mode != "update":
            raise ValueError("Entries can only be deleted from an archive opened for update.")
        if self._entries.get(entry.name) is entry:
            del self._entries[entry.name]
            if entry.info is not None:
                self._deleted = True

    def add(self, obj: FileSystemObject, name: str) -> None:
        """Add *obj* to the archive under *name*.

        The name must not already be present; delete the old entry first.
        """
        if name in self._entries:
            raise ValueError(f"Duplicate archive entry: {name}")
        if self._mode == "create":
            assert self._zip is not None
            self._zip.write(obj.path, name, **self._kwargs)
            self._entries[name] = ArchiveEntry(name, _file_time(obj.path))
        else:
            self._entries[name] = ArchiveEntry(name, _file_time(obj.path), source=obj.path)

    def _pending(self) -> list[ArchiveEntry]:
        return [e for e in self._entries.values() if e.source is not None]

    def _write_pending(self, zf: zipfile.ZipFile) -> None:
        for entry in self._pending():
            assert entry.source is not None
            zf.write(entry.source, entry.name, **self._kwargs)

    def _copy_entry(self, src: zipfile.ZipFile, dst: zipfile.ZipFile, info: zipfile.ZipInfo) -> None:
        """Stream one stored entry from *src* into *dst*."""
        new_info = zipfile.ZipInfo(info.filename, date_time=info.date_time)
        new_info.compress_type = info.compress_type
        new_info.external_attr = info.external_attr
        new_info.comment = info.comment
        if info.is_dir():
            dst.writestr(new_info, b"")
            return
        new_info.file_size = info.file_size
        with src.open(info) as fin, dst.open(
            new_info, "w", force_zip64=info.file_size >= zipfile.ZIP64_LIMIT
        ) as fout:
            shutil.copyfileobj(fin, fout, COPY_BUFFER_SIZE)

    def _rewrite(self) -> None:
        """Rebuild the archive from the surviving and pending entries."""
        assert self._zip is not None
        survivors = {id(e.info) for e in self._entries.values() if e.info is not None}
        directory = os.path.dirname(os.path.abspath(self._path))
        fd, tmp_path = tempfile.mkstemp(prefix=".zipsync-", suffix=".tmp", dir=directory)
        os.close(fd)
        try:
            with zipfile.ZipFile(tmp_path, "w", strict_timestamps=False) as out:
                for info in self._zip.infolist():
                    if id(info) in survivors:
                        self._copy_entry(self._zip, out, info)
                self._write_pending(out)
            self._zip.close()
            os.replace(tmp_path, self._path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def close(self) -> None:
        """Flush session changes to disk and release the archive."""
        if self._zip is None:
            return
        try:
            if self._mode == "update":
                if self._deleted:
                    self._rewrite()
                elif self._pending():
                    self._zip.close()
                    with zipfile.ZipFile(self._path, "a", strict_timestamps=False) as zf:
                        self._write_pending(zf)
        finally:
            self._zip.close()
            self._zip = None

    def discard(self) -> None:
        """Release the archive, dropping pending update-mode changes."""
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def __enter__(self) -> ArchiveSession:
        return self

    def __exit__(self, exc_type: object, *exc: object) -> None:
        if exc_type is None or self._mode == "create":
            self.close()
        else:
            self.discard()


# ── Compress ─────────────────────────────────────────────────────────────────


def _archive_mode(
    archive_path: str,
    action: ExistingArchiveAction,
) -> Literal["create", "update"] | None:
    """Apply the existing-archive *action*; ``None`` means leave it alone."""
    if not os.path.isfile(archive_path):
        return "create"
    if action is ExistingArchiveAction.UPDATE:
        return "update"
    if action is ExistingArchiveAction.REPLACE:
        os.remove(archive_path)
        return "create"
    if action is ExistingArchiveAction.ERROR:
        raise ConflictError(f"The zip file {archive_path} already exists.")
    return None


def compress(
    source_dir: str,
    archive_path: str,
    action: ExistingArchiveAction | str = DEFAULT_ARCHIVE_ACTION,
    overwrite: OverwritePolicy | str = DEFAULT_OVERWRITE_POLICY,
    compression: CompressionLevel | str = DEFAULT_COMPRESSION,
    *,
    verbose: bool = False,
) -> str:
    """Compress the tree at *source_dir* into the ZIP at *archive_path*.

    Entry names are relative to the parent of *source_dir*, so the tree
    root's own name is the first component of every entry.

    Parameters
    ----------
    source_dir : str
        Directory to archive.
    archive_path : str
        Destination archive path.
    action : ExistingArchiveAction | str
        What to do when *archive_path* already exists.
    overwrite : OverwritePolicy | str
        Per-entry policy when updating an existing archive.  Ignored when
        a new archive is created.
    compression : CompressionLevel | str
        Compression hint passed to the codec.
    verbose : bool
        Report each entry decision to stderr.

    Returns
    -------
    str
        *archive_path* on success.

    Raises
    ------
    ConflictError
        *archive_path* exists and *action* is ``error``.
    CompressionError
        Anything else went wrong; the message carries the cause chain.
    """
    action = ExistingArchiveAction(action)
    overwrite = OverwritePolicy(overwrite)
    compression = CompressionLevel(compression)

    counts = {"add": 0, "replace": 0, "skip": 0}
    try:
        if not os.path.isdir(source_dir):
            raise FileNotFoundError(f"Source directory does not exist: {source_dir}")

        mode = _archive_mode(archive_path, action)
        if mode is None:
            if verbose:
                _log(f"{archive_path} exists, nothing to do.")
            return archive_path

        source_root = os.path.abspath(source_dir)
        tree_root_parent = os.path.dirname(source_root)
        archive_abs = os.path.abspath(archive_path)
        archive_home = os.path.dirname(archive_abs)
        objects = _collect_objects(source_root, exclude=archive_abs)

        if verbose:
            _log(f"{'Updating' if mode == 'update' else 'Creating'} {archive_path} "
                 f"from {len(objects)} object(s)")

        with ArchiveSession(archive_path, mode, compression) as session:
            for obj in objects:
                name = translate_path(obj.marked_path, tree_root_parent)
                if session.mode == "create":
                    decision: EntryAction = "add"
                else:
                    existing = session.find(name)
                    source_time = _file_time(obj.path)
                    if existing is not None and obj.is_dir and obj.path == archive_home:
                        # Writing the archive touches the directory holding it.
                        source_time = min(source_time, existing.modified)
                    decision = decide_update(
                        overwrite,
                        existing.modified if existing is not None else None,
                        source_time,
                    )
                    if decision == "replace":
                        assert existing is not None
                        session.delete(existing)
                if decision != "skip":
                    session.add(obj, name)
                counts[decision] += 1
                if verbose:
                    _log(f"  {decision:<8} {name}")
    except ConflictError:
        raise
    except Exception as exc:
        raise CompressionError.wrapping("Error compressing archive: ", exc) from exc

    if verbose:
        _log(f"Wrote {archive_path} ({_format_size(os.path.getsize(archive_path))}): "
             f"{_summary(counts)}")

    return archive_path


# ── Extract ──────────────────────────────────────────────────────────────────


def _destination(dest_root: str, name: str) -> str:
    """Join archive entry *name* onto *dest_root*, refusing to escape it."""
    relative = name.lstrip("/")
    dest = os.path.normpath(os.path.join(dest_root, *relative.split("/")))
    abs_root = os.path.abspath(dest_root)
    abs_dest = os.path.abspath(dest)
    if abs_dest != abs_root and not abs_dest.startswith(os.path.join(abs_root, "")):
        raise ValueError(f"Path traversal detected in archive entry: {name}")
    return dest


def _extract_entry(
    zf: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    dest_root: str,
    overwrite: OverwritePolicy,
) -> EntryAction | None:
    """Materialize one entry below *dest_root*.

    Returns the decision taken, or ``None`` for directory markers.
    """
    dest = _destination(dest_root, info.filename)

    if info.filename.endswith(DIR_MARKER):
        os.makedirs(dest, exist_ok=True)
        return None
    os.makedirs(os.path.dirname(dest) or os.curdir, exist_ok=True)

    entry_time = _entry_time(info)
    dest_time = _file_time(dest) if os.path.isfile(dest) else None
    decision = decide_extract(overwrite, entry_time, dest_time)
    if decision == "skip":
        return decision

    with zf.open(info) as fin, open(dest, "wb") as fout:
        shutil.copyfileobj(fin, fout, COPY_BUFFER_SIZE)
    stamp = entry_time.timestamp()
    os.utime(dest, (stamp, stamp))
    return decision


def uncompress(
    archive_path: str,
    dest_dir: str,
    overwrite: OverwritePolicy | str = DEFAULT_OVERWRITE_POLICY,
    *,
    verbose: bool = False,
) -> str:
    """Extract the ZIP at *archive_path* below *dest_dir*.

    Directory structure is always materialized; files are written or
    skipped according to *overwrite*.  Extracted files take the entry's
    stored modification time.  Entries are independent: a failure part way
    leaves the earlier ones on disk.

    Raises
    ------
    ExtractionError
        Any failure; the message carries the cause chain.
    """
    overwrite = OverwritePolicy(overwrite)
    counts = {"add": 0, "replace": 0, "skip": 0}

    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            infos = zf.infolist()
            if verbose:
                _log(f"Extracting {len(infos)} entries → {dest_dir}")
            for info in infos:
                decision = _extract_entry(zf, info, dest_dir, overwrite)
                if decision is None:
                    continue
                counts[decision] += 1
                if verbose:
                    _log(f"  {decision:<8} {info.filename}")
    except Exception as exc:
        raise ExtractionError.wrapping("Error un-compressing archive: ", exc) from exc

    if verbose:
        _log(f"Extracted {archive_path}: {_summary(counts)}")

    return dest_dir


# ── Argument parser ──────────────────────────────────────────────────────────


def _choices(enum: type[Enum]) -> list[str]:
    return [member.value for member in enum]


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    # Shared flags inherited by all subcommands.
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report every entry decision and a summary.",
    )
    shared.add_argument(
        "--overwrite",
        choices=_choices(OverwritePolicy),
        default=DEFAULT_OVERWRITE_POLICY.value,
        help="Per-entry policy when the target exists (default: %(default)s).",
    )

    from zip_sync import __version__

    parser = argparse.ArgumentParser(
        prog="zipsync",
        description=(
            "Synchronize a directory tree with a ZIP archive, "
            "adding, replacing or skipping entries by policy."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s compress -i docs/ -o docs.zip -v\n"
            "  %(prog)s compress -i docs/ -o docs.zip --action update --overwrite always\n"
            "  %(prog)s compress -i docs/ -o docs.zip --action ignore\n"
            "  %(prog)s extract -i docs.zip -o restored/ -v\n"
            "  %(prog)s extract -i docs.zip -o restored/ --overwrite never\n"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # ── compress ─────────────────────────────────────────────────────────
    comp = sub.add_parser(
        "compress",
        parents=[shared],
        help="Compress a directory into an archive.",
    )
    comp.add_argument(
        "-i",
        "--input",
        required=True,
        help="Source directory.",
    )
    comp.add_argument(
        "-o",
        "--output",
        required=True,
        help="Destination archive.",
    )
    comp.add_argument(
        "--action",
        choices=_choices(ExistingArchiveAction),
        default=DEFAULT_ARCHIVE_ACTION.value,
        help="What to do if the archive already exists (default: %(default)s).",
    )
    comp.add_argument(
        "--compression",
        choices=_choices(CompressionLevel),
        default=DEFAULT_COMPRESSION.value,
        help="Compression level (default: %(default)s).",
    )

    # ── extract ──────────────────────────────────────────────────────────
    ext = sub.add_parser(
        "extract",
        parents=[shared],
        help="Extract an archive into a directory.",
    )
    ext.add_argument(
        "-i",
        "--input",
        required=True,
        help="Source archive.",
    )
    ext.add_argument(
        "-o",
        "--output",
        required=True,
        help="Destination directory (created if needed).",
    )

    return parser


# ── Entry point ──────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose: bool = args.verbose

    try:
        if args.command == "compress":
            compress(
                args.input,
                args.output,
                action=args.action,
                overwrite=args.overwrite,
                compression=args.compression,
                verbose=verbose,
            )
        elif args.command == "extract":
            uncompress(
                args.input,
                args.output,
                overwrite=args.overwrite,
                verbose=verbose,
            )
    except ZipSyncError as exc:
        print(f"Error: {str(exc).rstrip()}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        _log("Done.")


if __name__ == "__main__":
    main()
