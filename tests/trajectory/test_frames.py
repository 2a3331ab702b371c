"""Unit tests for frame and object lookup."""

import pytest

from geotrajectory.trajectory.frames import (
    FrameNotFoundError,
    MappingFrames,
    ObjectNotFoundError,
    ObjectRecord,
    SequenceFrames,
    find_by_id,
    frame_lookup,
    object_motions,
    objects_at_frame,
)


def make_object_frames():
    """Three frames; object "a" lives in frames 0-2, "b" only in frame 1."""
    return [
        [{"id": "a", "x": 1.0, "y": 0.0, "z": 0.0, "firstFrame": 0, "lastFrame": 3}],
        [{"id": "a", "x": 2.0, "y": 0.0, "z": 0.0, "firstFrame": 0, "lastFrame": 3},
         {"id": "b", "x": 0.0, "y": 5.0, "z": 0.0, "firstFrame": 1, "lastFrame": 2}],
        [{"id": "a", "x": 3.0, "y": 0.0, "z": 0.0, "firstFrame": 0, "lastFrame": 3}],
    ]


class TestObjectRecord:
    """Test suite for ObjectRecord."""

    def test_from_camel_case(self):
        """Test camelCase lifetime keys."""
        record = ObjectRecord.from_mapping({"id": 7, "x": 1, "y": 2, "firstFrame": 3, "lastFrame": 9})

        assert record == ObjectRecord(id=7, x=1.0, y=2.0, z=0.0, first_frame=3, last_frame=9)
        assert record.offset == (1.0, 2.0, 0.0)

    def test_from_snake_case(self):
        """Test snake_case lifetime keys and open ended lifetime."""
        record = ObjectRecord.from_mapping({"id": "car", "first_frame": 2})

        assert record.first_frame == 2
        assert record.last_frame is None


class TestFrameLookup:
    """Test suite for the FrameLookup implementations."""

    def test_frame_lookup_dispatch(self):
        """Test raw storage is wrapped by its shape."""
        assert isinstance(frame_lookup([[]]), SequenceFrames)
        assert isinstance(frame_lookup({0: []}), MappingFrames)

        lookup = MappingFrames({})
        assert frame_lookup(lookup) is lookup

    def test_storage_uniformity(self):
        """Test sequence and mapping storage give identical results."""
        frames = make_object_frames()
        keyed = dict(enumerate(frames))

        for i in range(len(frames)):
            assert objects_at_frame(frames, i) == objects_at_frame(keyed, i)

    def test_mapping_missing_frame(self):
        """Test a missing key gives None, require raises."""
        keyed = {0: [], 5: []}

        assert objects_at_frame(keyed, 3) is None
        with pytest.raises(FrameNotFoundError):
            MappingFrames(keyed).require(3)

    def test_sequence_out_of_range(self):
        """Test positional storage faults outside its bounds."""
        frames = make_object_frames()

        with pytest.raises(IndexError):
            objects_at_frame(frames, 3)
        with pytest.raises(IndexError):
            objects_at_frame(frames, -1)

    def test_frame_count(self):
        """Test frame_count is one past the highest frame number."""
        assert SequenceFrames([1, 2, 3]).frame_count == 3
        assert MappingFrames({0: 1, 7: 2}).frame_count == 8
        assert MappingFrames({}).frame_count == 0


class TestFindById:
    """Test suite for find_by_id."""

    def test_find_dict(self):
        """Test dict objects are found and converted."""
        record = find_by_id(make_object_frames()[1], "b")

        assert record.id == "b"
        assert record.offset == (0.0, 5.0, 0.0)

    def test_find_record(self):
        """Test ObjectRecord instances are returned unchanged."""
        target = ObjectRecord(id=1, x=4.0)
        assert find_by_id([ObjectRecord(id=0), target], 1) is target

    def test_not_found(self):
        """Test a missing id raises."""
        with pytest.raises(ObjectNotFoundError):
            find_by_id(make_object_frames()[0], "b")

    def test_no_objects(self):
        """Test a frame without an object list raises."""
        with pytest.raises(ObjectNotFoundError):
            find_by_id(None, "a")


class TestObjectMotions:
    """Test suite for object_motions."""

    def test_full_lifetime(self):
        """Test all frames of the lifetime are resolved in order."""
        target = {"id": "a", "firstFrame": 0, "lastFrame": 3}
        motions = object_motions(target, make_object_frames(), 0, 10)

        assert [frame for frame, _ in motions] == [0, 1, 2]
        assert [record.x for _, record in motions] == [1.0, 2.0, 3.0]

    def test_lifetime_clipping(self):
        """Test the range is intersected with the lifetime."""
        target = {"id": "b", "firstFrame": 1, "lastFrame": 2}
        motions = object_motions(target, make_object_frames(), 0, 3)

        assert [frame for frame, _ in motions] == [1]

    def test_missing_within_lifetime(self):
        """Test a gap inside the lifetime raises instead of skipping."""
        target = {"id": "b", "firstFrame": 0, "lastFrame": 2}

        with pytest.raises(ObjectNotFoundError, match="frame 0"):
            object_motions(target, make_object_frames(), 0, 3)
