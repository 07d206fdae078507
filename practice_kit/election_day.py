"""Vote counting for election day."""

from dataclasses import dataclass
from typing import MutableMapping, Optional


@dataclass
class VoteCounter:
    """A shared, mutable count of votes."""

    votes: int = 0


@dataclass
class ElectionResult:
    """The result for one candidate."""

    name: str
    votes: int


def new_vote_counter(initial_votes: int) -> VoteCounter:
    """Return a counter holding ``initial_votes``."""
    return VoteCounter(initial_votes)


def vote_count(counter: Optional[VoteCounter]) -> int:
    """Return the votes in ``counter``, or 0 if there is no counter."""
    return 0 if counter is None else counter.votes


def increment_vote_count(counter: VoteCounter, increment: int) -> None:
    """Add ``increment`` votes to ``counter``."""
    counter.votes += increment


def new_election_result(candidate_name: str, votes: int) -> ElectionResult:
    """Create a result for a candidate."""
    return ElectionResult(name=candidate_name, votes=votes)


def display_result(result: ElectionResult) -> str:
    """Format a result as "Name (votes)"."""
    return f"{result.name} ({result.votes})"


def decrement_votes_of_candidate(results: MutableMapping[str, int], candidate: str) -> None:
    """Remove one vote from ``candidate``; an absent candidate ends at -1."""
    results[candidate] = results.get(candidate, 0) - 1