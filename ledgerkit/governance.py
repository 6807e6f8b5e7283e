"""On-chain proposals with stake-weighted voting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Proposal:
    """A governance proposal and its tally."""

    id: int
    title: str
    description: str
    proposer: str
    end_time: int
    votes_for: int = 0
    votes_against: int = 0
    executed: bool = False


class Governance:
    """Creates proposals, records votes and executes passed proposals."""

    def __init__(self, voting_period: int, min_stake: int) -> None:
        self.proposals: dict[int, Proposal] = {}
        self.next_id = 1
        self.voting_period = voting_period
        self.min_stake = min_stake

    def create_proposal(self, title: str, description: str, proposer: str, current_time: int) -> int:
        """Open a proposal for voting and return its id."""
        proposal_id = self.next_id
        self.next_id += 1
        self.proposals[proposal_id] = Proposal(
            id=proposal_id,
            title=title,
            description=description,
            proposer=proposer,
            end_time=current_time + self.voting_period,
        )
        return proposal_id

    def vote(self, proposal_id: int, voter: str, stake: int, approve: bool) -> bool:
        """Add ``stake`` to one side of the tally; requires the minimum stake."""
        if stake < self.min_stake:
            return False
        proposal = self.proposals.get(proposal_id)
        if proposal is None:
            return False
        if approve:
            proposal.votes_for += stake
        else:
            proposal.votes_against += stake
        return True

    def execute_proposal(self, proposal_id: int, current_time: int) -> bool:
        """After voting ends, execute the proposal if more stake approved it."""
        proposal = self.proposals.get(proposal_id)
        if proposal is None or current_time < proposal.end_time or proposal.executed:
            return False
        proposal.executed = proposal.votes_for > proposal.votes_against
        return proposal.executed