"""
Core business logic modules for RoleScout.

Submodules:
- entitlement: Region entitlement from subscriptions
- collection: Candidate role gathering and merging
- matching: Talent-role scoring
- ranking: Qualification and ordering
- suggestions: The role suggestion service
"""
