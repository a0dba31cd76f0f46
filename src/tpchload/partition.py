from dataclasses import dataclass
from typing import List, Sequence

from tpchload.errors import InvalidHostCount


@dataclass(frozen=True)
class SplitAssignment:
    """
    The inclusive range of file splits that one host generates. Splits are
    numbered starting from 1.
    """

    host: str
    first_split: int
    last_split: int

    @property
    def num_splits(self) -> int:
        return self.last_split - self.first_split + 1


def partition(num_file_splits: int, hosts: Sequence[str]) -> List[SplitAssignment]:
    """
    Divides the splits `1..num_file_splits` evenly across `hosts`, in order.
    The last host absorbs the remainder. Assignment stops as soon as every
    split is covered, so a host never receives an empty range.
    """
    if len(hosts) == 0:
        raise InvalidHostCount("There must be at least one host.")
    if num_file_splits < 1:
        raise ValueError("The number of file splits must be at least 1.")

    per_host = max(1, num_file_splits // len(hosts))
    assignments: List[SplitAssignment] = []
    first_split = 1

    for idx, host in enumerate(hosts):
        if idx == len(hosts) - 1:
            last_split = num_file_splits
        else:
            last_split = first_split + per_host - 1
        assignments.append(SplitAssignment(host, first_split, last_split))

        first_split = last_split + 1
        if last_split == num_file_splits:
            break

    return assignments
