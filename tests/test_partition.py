import pytest

from tpchload.errors import InvalidHostCount
from tpchload.partition import SplitAssignment, partition


def _check_covers_exactly(assignments, num_file_splits):
    expected_first = 1
    for a in assignments:
        assert a.first_split == expected_first
        assert a.last_split >= a.first_split
        expected_first = a.last_split + 1
    assert assignments[-1].last_split == num_file_splits


def test_single_host():
    assignments = partition(10, ["localhost"])
    assert assignments == [SplitAssignment("localhost", 1, 10)]
    assert assignments[0].num_splits == 10


def test_single_split():
    assert partition(1, ["localhost"]) == [SplitAssignment("localhost", 1, 1)]


def test_last_host_absorbs_remainder():
    assignments = partition(10, ["h1", "h2", "h3"])
    assert assignments == [
        SplitAssignment("h1", 1, 3),
        SplitAssignment("h2", 4, 6),
        SplitAssignment("h3", 7, 10),
    ]


def test_stops_once_all_splits_assigned():
    # Fewer splits than hosts: each host gets one split until they run out.
    assignments = partition(2, ["h1", "h2", "h3", "h4"])
    assert assignments == [
        SplitAssignment("h1", 1, 1),
        SplitAssignment("h2", 2, 2),
    ]


@pytest.mark.parametrize("num_file_splits", [1, 2, 7, 16, 101])
@pytest.mark.parametrize("num_hosts", [1, 2, 3, 5, 8])
def test_ranges_partition_all_splits(num_file_splits, num_hosts):
    hosts = ["host{}".format(i) for i in range(num_hosts)]
    assignments = partition(num_file_splits, hosts)
    _check_covers_exactly(assignments, num_file_splits)
    assert len(assignments) <= num_hosts
    # Hosts are used in list order.
    assert [a.host for a in assignments] == hosts[: len(assignments)]


def test_no_hosts():
    with pytest.raises(InvalidHostCount):
        partition(10, [])


def test_no_splits():
    with pytest.raises(ValueError):
        partition(0, ["localhost"])
