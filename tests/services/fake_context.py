"""Fake PersistenceContext — scripted staging/commit signals for failure-path tests.

Records every call in order so tests can assert the validation gate
short-circuited before persistence was touched.
"""

from autorenter.core.domain_types import CommitOutcome, EntityState


class FakeContext:
    """Scripted PersistenceContext: records calls, returns configured signals."""

    def __init__(
        self, existing=None,
        add_state=EntityState.ADDED, remove_state=EntityState.DELETED,
        update_state=EntityState.MODIFIED, commit=CommitOutcome.COMMITTED,
    ):
        self.existing = existing
        self.add_state = add_state
        self.remove_state = remove_state
        self.update_state = update_state
        self.commit_outcome = commit
        self.calls = []

    async def find_by_id(self, entity_type, entity_id):
        self.calls.append("find_by_id")
        return self.existing

    async def find_all(self, entity_type, **filters):
        self.calls.append("find_all")
        return []

    def add(self, entity):
        self.calls.append("add")
        return self.add_state

    async def remove(self, entity):
        self.calls.append("remove")
        return self.remove_state

    async def update(self, entity):
        self.calls.append("update")
        return self.update_state

    async def commit(self):
        self.calls.append("commit")
        return self.commit_outcome
