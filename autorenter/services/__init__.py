"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services own IO (persistence context); core/ owns the rules
    - Every service operation returns a Result or a bare ResultCode

Design Decisions:
    - Per-entity façades delegate mutations to the generic commands
"""
