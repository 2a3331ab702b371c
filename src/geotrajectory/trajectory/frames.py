"""Per-frame lookup of poses and tracked objects.

Frame data arrives either as a sequence indexed by frame number or as
a mapping keyed by frame number.  `frame_lookup` wraps the storage once
in a `FrameLookup` so that the trajectory code can address frames the
same way regardless of how they were stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple, Union


class FrameNotFoundError(LookupError):
    """Raised when a frame number has no entry in keyed storage."""


class ObjectNotFoundError(LookupError):
    """Raised when a tracked object is missing from a frame it should be in."""


@dataclass(frozen=True)
class ObjectRecord:
    """A tracked object as observed in one frame."""

    id: Hashable
    """Identifier, stable across frames for the same object."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    first_frame: int = 0
    """First frame in which the object exists (inclusive)."""

    last_frame: Optional[int] = None
    """Frame right after the object disappears (exclusive).  ``None``
    means the lifetime is open ended."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ObjectRecord":
        """Build a record from a dict with camelCase or snake_case keys."""
        first = data.get("firstFrame", data.get("first_frame"))
        last = data.get("lastFrame", data.get("last_frame"))
        return cls(
            id=data["id"],
            x=float(data.get("x") or 0.0),
            y=float(data.get("y") or 0.0),
            z=float(data.get("z") or 0.0),
            first_frame=int(first) if first is not None else 0,
            last_frame=int(last) if last is not None else None,
        )

    @property
    def offset(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


ObjectLike = Union[ObjectRecord, Mapping[str, Any]]


def as_object_record(value: ObjectLike) -> ObjectRecord:
    if isinstance(value, ObjectRecord):
        return value
    return ObjectRecord.from_mapping(value)


class FrameLookup(ABC):
    """Uniform access to per-frame entries."""

    @abstractmethod
    def get(self, frame_number: int) -> Optional[Any]:
        """Entry stored for `frame_number`, or ``None`` if there is none."""

    @property
    @abstractmethod
    def frame_count(self) -> int:
        """Number of frame slots, i.e. one past the highest frame number."""

    def require(self, frame_number: int) -> Any:
        """Entry for `frame_number`; raise if the frame has no entry."""
        entry = self.get(frame_number)
        if entry is None:
            raise FrameNotFoundError(f"No entry for frame {frame_number}")
        return entry


class SequenceFrames(FrameLookup):
    """Frames stored positionally, entry ``i`` belongs to frame ``i``."""

    def __init__(self, frames: Sequence[Any]):
        self._frames = frames

    def get(self, frame_number: int) -> Optional[Any]:
        if frame_number < 0:
            raise IndexError(f"Frame number must be non-negative, got {frame_number}")
        return self._frames[frame_number]

    @property
    def frame_count(self) -> int:
        return len(self._frames)


class MappingFrames(FrameLookup):
    """Frames stored in a mapping keyed by frame number."""

    def __init__(self, frames: Mapping[int, Any]):
        self._frames = frames

    def get(self, frame_number: int) -> Optional[Any]:
        return self._frames.get(frame_number)

    @property
    def frame_count(self) -> int:
        return max(self._frames.keys()) + 1 if self._frames else 0


FrameStorage = Union[FrameLookup, Sequence[Any], Mapping[int, Any]]


def frame_lookup(frames: FrameStorage) -> FrameLookup:
    """Wrap raw frame storage in the matching `FrameLookup`."""
    if isinstance(frames, FrameLookup):
        return frames
    if isinstance(frames, Mapping):
        return MappingFrames(frames)
    return SequenceFrames(frames)


def objects_at_frame(frames: FrameStorage, frame_number: int) -> Optional[Sequence[ObjectLike]]:
    """Objects stored for `frame_number`.

    Returns ``None`` if keyed storage has no entry for the frame.  For
    positional storage an out-of-range frame number raises
    ``IndexError``.
    """
    return frame_lookup(frames).get(frame_number)


def find_by_id(objects: Optional[Iterable[ObjectLike]], object_id: Hashable) -> ObjectRecord:
    """Find the object with `object_id` in one frame's object list.

    Raises
    ------
    ObjectNotFoundError
        If the list is missing or holds no object with that id.
    """
    if objects is None:
        raise ObjectNotFoundError(f"Object {object_id!r} not found: frame has no objects")
    for obj in objects:
        record = as_object_record(obj)
        if record.id == object_id:
            return record
    raise ObjectNotFoundError(f"Object {object_id!r} not found in frame")


def object_motions(target: ObjectLike, object_frames: FrameStorage,
                   start_frame: int, end_frame: int) -> List[Tuple[int, ObjectRecord]]:
    """Per-frame records of `target` within its lifetime.

    The range ``[start_frame, end_frame)`` is intersected with
    ``[target.first_frame, target.last_frame)``.

    Returns
    -------
    list of (int, ObjectRecord)
        Absolute frame number and the target's record in that frame.
    """
    target = as_object_record(target)
    lookup = frame_lookup(object_frames)
    start = max(target.first_frame, start_frame)
    end = end_frame if target.last_frame is None else min(target.last_frame, end_frame)

    motions = []
    for frame_number in range(start, end):
        try:
            record = find_by_id(lookup.get(frame_number), target.id)
        except ObjectNotFoundError as exc:
            raise ObjectNotFoundError(f"Object {target.id!r} missing from frame {frame_number}") from exc
        motions.append((frame_number, record))
    return motions
