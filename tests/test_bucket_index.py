from bikeflow.traffic.bucket_index import TimeBucketIndex
from bikeflow.traffic.minutes import minute_of_day


def test_every_trip_lands_in_exactly_one_bucket_per_direction(make_trip):
    trips = [
        make_trip("A", "B", 5, 25),
        make_trip("B", "C", 5, 5),
        make_trip("C", "A", 1439, 1440 + 3),  # ends after midnight
        make_trip("A", "A", 600, 659),
    ]
    index = TimeBucketIndex.build(trips)

    assert len(index.departure_buckets) == 1440
    assert len(index.arrival_buckets) == 1440

    for trip in trips:
        dep_hits = [m for m, b in enumerate(index.departure_buckets) if trip in b]
        arr_hits = [m for m, b in enumerate(index.arrival_buckets) if trip in b]
        assert dep_hits == [minute_of_day(trip.started_at)]
        assert arr_hits == [minute_of_day(trip.ended_at)]

    assert index.arrival_buckets[3] == (trips[2],)
    assert index.trip_count == len(trips)


def test_identical_trips_are_all_kept(make_trip):
    t = make_trip("A", "B", 10, 20)
    index = TimeBucketIndex.build([t, t, t])

    assert len(index.departure_buckets[10]) == 3
    assert len(index.arrival_buckets[20]) == 3
    assert index.trip_count == 3


def test_empty_trip_set():
    index = TimeBucketIndex.build([])

    assert index.trip_count == 0
    assert all(b == () for b in index.departure_buckets)
    assert all(b == () for b in index.arrival_buckets)


def test_buckets_are_read_only(make_trip):
    index = TimeBucketIndex.build([make_trip("A", "B", 1, 2)])

    assert isinstance(index.departure_buckets, tuple)
    assert all(isinstance(b, tuple) for b in index.arrival_buckets)


def test_build_accepts_a_generator_with_progress(minute_trips):
    index = TimeBucketIndex.build((t for t in minute_trips), progress=True)

    assert index.trip_count == 1440
    assert all(len(b) == 1 for b in index.departure_buckets)
